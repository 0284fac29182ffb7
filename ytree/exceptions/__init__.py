"""异常处理模块

提供编码生成器使用的异常类。

使用示例:
    from ytree.exceptions import Err, InvalidArgumentException

    if not code:
        raise Err.invalid_argument("code")
"""

from .exceptions import (
    Err,
    ErrorCode,
    ErrorCodeType,
    BusinessException,
    ValidationException,
    InvalidArgumentException,
)

__all__ = [
    "Err",
    "ErrorCode",
    "ErrorCodeType",
    "BusinessException",
    "ValidationException",
    "InvalidArgumentException",
]
