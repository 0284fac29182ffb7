"""
配置模块
提供编码生成器与日志的默认配置，业务项目可以继承并覆盖
"""

from pydantic_settings import BaseSettings
from pydantic import Field


class TreeCodeSettings(BaseSettings):
    """树形编码配置

    code_length 决定每一级编码补零后的宽度，生成器创建后不可修改。

    使用示例:
        from ytree.config import TreeCodeSettings

        settings = TreeCodeSettings(code_length=4)   # "0001.0002"

        # 或通过环境变量注入
        # YTREE_CODE_LENGTH=6, YTREE_HYPHEN=/
        settings = TreeCodeSettings()
    """
    code_length: int = Field(default=5, gt=0, description="每级编码的固定宽度（补零位数）")
    hyphen: str = Field(default="-", min_length=1, description="全称（FullName）默认连接符")

    class Config:
        env_prefix = "YTREE_"
        frozen = True


class LoggingSettings(BaseSettings):
    """日志配置

    使用示例:
        from ytree.config import LoggingSettings

        log_config = LoggingSettings(level="DEBUG", file_path="logs/ytree.log")
    """
    level: str = Field(default="INFO", description="日志级别")
    log_format: str = Field(default="", description="日志格式，为空时使用默认格式")
    file_path: str = Field(default="", description="日志文件路径，为空时不写文件")
    file_encoding: str = Field(default="utf-8", description="文件编码")
    enable_console: bool = Field(default=True, description="是否启用控制台输出")
    use_microseconds: bool = Field(default=True, description="时间戳是否使用微秒精度")

    class Config:
        env_prefix = "YTREE_LOG_"
