"""
YTree - 树形结构物化路径编码库

提供树形编码生成、合并、分解，以及配置、日志、异常等基础功能
"""

from .version import __version__, __author__, __description__

# 导出编码生成器
from .code import (
    CODE_SEPARATOR,
    TreeCodeGenerator,
    TreeCodeGeneratorProtocol,
    create_code_generator,
)

# 导出配置
from .config import (
    TreeCodeSettings,
    LoggingSettings,
    ConfigLoader,
    load_yaml_config,
)

# 导出异常
from .exceptions import (
    Err,
    ErrorCode,
    BusinessException,
    ValidationException,
    InvalidArgumentException,
)

# 导出日志工具
from .log import (
    setup_logger,
    setup_logger_from_settings,
    get_logger,
)

__all__ = [
    "__version__",
    "__author__",
    "__description__",

    # 编码生成器
    "CODE_SEPARATOR",
    "TreeCodeGenerator",
    "TreeCodeGeneratorProtocol",
    "create_code_generator",

    # 配置
    "TreeCodeSettings",
    "LoggingSettings",
    "ConfigLoader",
    "load_yaml_config",

    # 异常
    "Err",
    "ErrorCode",
    "BusinessException",
    "ValidationException",
    "InvalidArgumentException",

    # 日志
    "setup_logger",
    "setup_logger_from_settings",
    "get_logger",
]
