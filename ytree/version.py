"""版本信息"""

__version__ = "0.1.0"
__author__ = "yafo-ai"
__description__ = "物化路径树形编码生成器"
