"""
日志工具模块
提供简化的日志配置功能
"""

import inspect
import logging
import os
import time
from typing import Optional

from ..config import LoggingSettings


class MicrosecondFormatter(logging.Formatter):
    """支持微秒精度的日志格式化器"""

    def formatTime(self, record, datefmt=None):
        ct = self.converter(record.created)
        if datefmt:
            s = time.strftime(datefmt, ct)
        else:
            s = time.strftime("%Y-%m-%d %H:%M:%S", ct)
        # 添加微秒部分（6位数）
        return "%s.%06d" % (s, (record.created - int(record.created)) * 1000000)


# 默认日志格式
DEFAULT_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(filename)s:%(lineno)d - %(message)s"


def create_formatter(
    log_format: str = None,
    datefmt: str = "%Y-%m-%d %H:%M:%S",
    use_microseconds: bool = True
) -> logging.Formatter:
    """创建日志格式化器

    Args:
        log_format: 日志格式字符串
        datefmt: 时间格式
        use_microseconds: 是否使用微秒精度

    Returns:
        日志格式化器
    """
    fmt = log_format or DEFAULT_LOG_FORMAT
    if use_microseconds:
        return MicrosecondFormatter(fmt=fmt, datefmt=datefmt)
    return logging.Formatter(fmt, datefmt=datefmt)


def setup_logger(
    name: str = None,
    level: str = "INFO",
    log_file: str = None,
    log_format: str = None,
    console: bool = True,
    use_microseconds: bool = True,
    propagate: bool = True,
    encoding: str = "utf-8",
) -> logging.Logger:
    """设置并返回配置好的日志记录器

    Args:
        name: 日志记录器名称，默认为root logger
        level: 日志级别，可选：DEBUG, INFO, WARNING, ERROR, CRITICAL
        log_file: 日志文件路径，如果不指定则不写入文件
        log_format: 日志格式，如果不指定则使用默认格式
        console: 是否输出到控制台
        use_microseconds: 是否使用微秒精度时间戳
        propagate: 是否传播到父日志器
        encoding: 日志文件编码

    Returns:
        配置好的日志记录器

    使用示例:
        from ytree.log import setup_logger

        # 打开编码生成器的调试日志
        logger = setup_logger("ytree.code", level="DEBUG")

        # 同时写文件
        logger = setup_logger("ytree", level="DEBUG", log_file="logs/ytree.log")
    """
    _logger = logging.getLogger(name) if name else logging.getLogger()
    _logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    _logger.propagate = propagate

    # 清除现有的处理器，重复调用不会叠加输出
    for handler in list(_logger.handlers):
        _logger.removeHandler(handler)
        handler.close()

    formatter = create_formatter(log_format, use_microseconds=use_microseconds)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        _logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding=encoding)
        file_handler.setFormatter(formatter)
        _logger.addHandler(file_handler)

    return _logger


def setup_logger_from_settings(
    settings: Optional[LoggingSettings] = None,
    name: str = "ytree",
    propagate: bool = True,
) -> logging.Logger:
    """根据 LoggingSettings 配置日志记录器

    Args:
        settings: 日志配置对象，为空时从环境变量（YTREE_LOG_*）读取
        name: 日志记录器名称
        propagate: 是否传播到父日志器

    Returns:
        配置好的日志记录器

    使用示例:
        from ytree.config import LoggingSettings, load_yaml_config
        from ytree.log import setup_logger_from_settings

        settings = load_yaml_config("config/settings.yaml", LoggingSettings, section="logging")
        setup_logger_from_settings(settings)
    """
    settings = settings or LoggingSettings()
    return setup_logger(
        name=name,
        level=settings.level,
        log_file=settings.file_path or None,
        log_format=settings.log_format or None,
        console=settings.enable_console,
        use_microseconds=settings.use_microseconds,
        propagate=propagate,
        encoding=settings.file_encoding,
    )


def get_logger(name: str = None) -> logging.Logger:
    """获取日志记录器，支持自动推断模块名

    无参数调用时，自动从调用栈获取模块的 __name__ 作为日志器名称。
    有参数调用时，简写名称（不含点号）自动添加 'ytree.' 前缀。

    使用示例:
        logger = get_logger()              # 在 ytree/code/generator.py 中 -> "ytree.code.generator"
        logger = get_logger("code")        # -> "ytree.code"
        logger = get_logger("app.tree")    # -> "app.tree"（包含点号不添加前缀）
    """
    if name is None:
        frame = inspect.currentframe()
        if frame is not None and frame.f_back is not None:
            name = frame.f_back.f_globals.get('__name__', 'ytree')
        else:
            name = 'ytree'
    elif name != 'ytree' and '.' not in name:
        name = f"ytree.{name}"

    return logging.getLogger(name)


# 编码生成器日志记录器
code_logger = get_logger("code")
