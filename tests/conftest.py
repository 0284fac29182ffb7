"""
Pytest 公共配置和 Fixtures

提供测试所需的公共资源：
- 编码生成器
- 隔离的环境变量与配置缓存
- 临时配置文件
"""

import os

import pytest

from ytree.code import TreeCodeGenerator
from ytree.config import ConfigLoader


# ==================== 隔离 Fixtures ====================

@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """清除 YTREE_* 环境变量与配置缓存，避免测试间相互影响"""
    for key in list(os.environ):
        if key.startswith("YTREE_"):
            monkeypatch.delenv(key, raising=False)
    ConfigLoader.clear_cache()
    yield
    ConfigLoader.clear_cache()


# ==================== 编码生成器 Fixtures ====================

@pytest.fixture
def generator():
    """code_length=5 的编码生成器"""
    return TreeCodeGenerator.from_code_length(5)


@pytest.fixture
def config_file(tmp_path):
    """创建临时 YAML 配置文件的工厂函数"""

    def _create_file(content: str, filename: str = "settings.yaml") -> str:
        filepath = tmp_path / filename
        filepath.parent.mkdir(parents=True, exist_ok=True)
        filepath.write_text(content, encoding="utf-8")
        return str(filepath)

    return _create_file
