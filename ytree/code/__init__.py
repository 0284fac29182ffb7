"""树形编码模块

提供物化路径编码（如 "00001.00002.00003"）与全称（如 "总公司-研发中心"）的
生成、合并、分解功能。树形数据的存储与查询由调用方负责。

主要组件:
- TreeCodeGenerator: 编码生成器
- TreeCodeGeneratorProtocol: 编码生成器协议
- create_code_generator: 从配置创建编码生成器

使用示例:
    from ytree.code import create_code_generator

    generator = create_code_generator(code_length=5)

    # 新建第一个根节点
    code = generator.create_code(1)                      # "00001"

    # 在其下追加子节点
    child = generator.merge_code(code, generator.create_code(1))   # "00001.00001"
    sibling = generator.get_next_code(child)                        # "00001.00002"

    # 移动子树时重写编码
    relative = generator.remove_parent_code(sibling, code)          # "00002"
    moved = generator.merge_code("00003", relative)                 # "00003.00002"
"""

from .generator import (
    CODE_SEPARATOR,
    TreeCodeGenerator,
    TreeCodeGeneratorProtocol,
    create_code_generator,
)

__all__ = [
    "CODE_SEPARATOR",
    "TreeCodeGenerator",
    "TreeCodeGeneratorProtocol",
    "create_code_generator",
]
