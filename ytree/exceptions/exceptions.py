"""异常类定义

定义树形编码库使用的异常类体系。

编码生成器只有一种失败：调用方违反参数约定（必填字符串为空、
parent_level 超出编码层级），统一抛出 InvalidArgumentException。
"""

import copy
from typing import Optional, List, Any, Dict, Union
from http import HTTPStatus
from enum import Enum


class ErrorCode(str, Enum):
    """错误代码枚举

    继承自 str，可以直接作为字符串使用。

    使用示例:
        from ytree.exceptions import ErrorCode, InvalidArgumentException

        try:
            generator.merge_code("00001", "")
        except InvalidArgumentException as e:
            assert e.code == ErrorCode.INVALID_ARGUMENT
    """

    # ==================== 通用错误 ====================
    BUSINESS_ERROR = "BUSINESS_ERROR"

    # ==================== 验证相关 (422) ====================
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"


# 类型别名，支持枚举和字符串
ErrorCodeType = Union[str, ErrorCode]


class BusinessException(Exception):
    """异常基类

    属性:
        message: 错误消息
        code: 错误代码（用于程序判断，支持 ErrorCode 枚举或字符串）
        status_code: HTTP 状态码，本库不使用，仅供上层 Web 服务把异常映射为响应
        details: 详细错误信息列表
        extra: 额外的上下文信息
    """

    def __init__(
        self,
        message: str,
        code: ErrorCodeType = ErrorCode.BUSINESS_ERROR,
        status_code: int = int(HTTPStatus.BAD_REQUEST),
        details: Optional[List[str]] = None,
        **extra: Any
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or []
        self.extra = extra
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式

        Returns:
            包含异常信息的字典
        """
        return {
            "message": self.message,
            "code": self.code,
            "status_code": self.status_code,
            # 返回深拷贝，调用方修改返回值不影响异常对象
            "details": copy.deepcopy(self.details),
            "extra": copy.deepcopy(self.extra)
        }

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code!r}, "
            f"status_code={self.status_code})"
        )


class ValidationException(BusinessException):
    """数据验证异常 (422)"""

    def __init__(
        self,
        message: str = "数据验证失败",
        code: ErrorCodeType = ErrorCode.VALIDATION_ERROR,
        details: Optional[List[str]] = None,
        **extra: Any
    ):
        super().__init__(
            message=message,
            code=code,
            status_code=int(HTTPStatus.UNPROCESSABLE_ENTITY),
            details=details,
            **extra
        )


class InvalidArgumentException(ValidationException, ValueError):
    """参数非法异常

    编码生成器在以下情况抛出：
        - 必填的编码/全称参数为空（None 或 ""）
        - parent_level 超出编码的层级数

    同时继承 ValueError，普通 Python 调用方可以直接 ``except ValueError``。

    使用示例:
        raise InvalidArgumentException("child_code", "child_code 不能为空")

        # 读取出错的参数名
        try:
            generator.get_parent_code("")
        except InvalidArgumentException as e:
            print(e.param_name)   # "code"
    """

    def __init__(
        self,
        param_name: str,
        message: Optional[str] = None,
        code: ErrorCodeType = ErrorCode.INVALID_ARGUMENT,
        details: Optional[List[str]] = None,
        **extra: Any
    ):
        self.param_name = param_name
        super().__init__(
            message=message or f"{param_name} 不能为空",
            code=code,
            details=details,
            param_name=param_name,
            **extra
        )


class Err:
    """异常快捷创建类

    使用示例:
        from ytree.exceptions import Err

        raise Err.invalid_argument("code")
        raise Err.invalid_argument("parent_level", "parent_level 超出编码层级")
        raise Err.invalid("数据验证失败", details=["code_length 必须大于 0"])
    """

    @staticmethod
    def invalid_argument(param_name: str, message: Optional[str] = None, **kwargs) -> InvalidArgumentException:
        """参数非法 (422)

        Args:
            param_name: 出错的参数名
            message: 错误消息，默认 "<param_name> 不能为空"
            **kwargs: 额外参数（details 等）
        """
        return InvalidArgumentException(param_name, message, **kwargs)

    @staticmethod
    def invalid(message: str = "数据验证失败", **kwargs) -> ValidationException:
        """数据验证失败 (422)"""
        return ValidationException(message, **kwargs)

    @staticmethod
    def fail(message: str = "操作失败", **kwargs) -> BusinessException:
        """通用异常 (400)"""
        return BusinessException(message, **kwargs)
