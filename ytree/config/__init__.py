"""配置模块

提供配置管理功能：
- TreeCodeSettings: 编码生成器配置（code_length、默认连接符）
- LoggingSettings: 日志配置
- ConfigLoader: YAML 配置加载器

快速开始:
    from ytree.config import TreeCodeSettings, load_yaml_config

    settings = load_yaml_config("config/settings.yaml", TreeCodeSettings, section="tree_code")

配置优先级: 构造参数 > 环境变量 > 默认值
"""

from .settings import (
    TreeCodeSettings,
    LoggingSettings,
)

from .loader import (
    ConfigLoader,
    load_yaml_config,
)

__all__ = [
    "TreeCodeSettings",
    "LoggingSettings",
    "ConfigLoader",
    "load_yaml_config",
]
