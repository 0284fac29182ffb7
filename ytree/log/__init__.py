"""日志模块

提供日志配置与日志记录器获取功能。

使用示例:
    from ytree.log import setup_logger, get_logger

    # 打开编码生成器的调试日志
    setup_logger("ytree.code", level="DEBUG")

    logger = get_logger()
"""

from .logger import (
    setup_logger,
    setup_logger_from_settings,
    create_formatter,
    MicrosecondFormatter,
    DEFAULT_LOG_FORMAT,
    code_logger,
    get_logger,
)

__all__ = [
    "setup_logger",
    "setup_logger_from_settings",
    "create_formatter",
    "MicrosecondFormatter",
    "DEFAULT_LOG_FORMAT",
    "code_logger",
    "get_logger",
]
