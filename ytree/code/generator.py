"""树形编码生成器

使用物化路径（Materialized Path）编码表示树形结构中的节点位置。

编码格式说明：
    - 每一级是一个固定宽度、补零的十进制序号，级与级之间用 "." 连接
    - 如 code_length=5 时，第 1 个根节点下第 2 个子节点下第 3 个子节点为 "00001.00002.00003"
    - 编码按字符串排序即为树的先序遍历顺序，适合数据库 LIKE 前缀查询

全称（FullName）与编码结构平行，每一级是节点名称，连接符由调用方指定，
如 "总公司-研发中心-平台部"。

"无编码"（根节点的父编码）统一用 None 表示，入参中 None 与 "" 等价。

使用示例:
    from ytree.code import TreeCodeGenerator

    generator = TreeCodeGenerator.from_code_length(5)

    generator.create_code(1, 2)                       # "00001.00002"
    generator.merge_code("00001", "00002")            # "00001.00002"
    generator.get_next_code("00001.00001")            # "00001.00002"
    generator.get_parent_code("00001.00002.00003")    # "00001.00002"
    generator.remove_parent_code("00001.00002.00003", "00001")  # "00002.00003"
    generator.remove_parent_code("00001.00002.00003", 2)        # "00003"
"""

from typing import Iterable, Optional, Protocol, Union, runtime_checkable

from ..config import TreeCodeSettings, load_yaml_config
from ..exceptions import Err
from ..log import code_logger


# 编码分隔符
CODE_SEPARATOR = "."


@runtime_checkable
class TreeCodeGeneratorProtocol(Protocol):
    """树形编码生成器协议

    树形数据层只依赖此协议，便于替换编码实现或在测试中模拟。
    """

    def create_code(self, *numbers: Union[int, Iterable[int]]) -> Optional[str]: ...

    def merge_code(self, parent_code: Optional[str], child_code: str) -> str: ...

    def merge_full_name(self, parent_full_name: Optional[str], child_full_name: str, hyphen: Optional[str] = None) -> str: ...

    def remove_parent_code(self, code: str, parent: Union[str, int, None]) -> Optional[str]: ...

    def remove_parent_full_name(self, full_name: str, parent: Union[str, int, None], hyphen: Optional[str] = None) -> Optional[str]: ...

    def get_next_code(self, code: str) -> str: ...

    def get_last_code(self, code: str) -> str: ...

    def get_parent_code(self, code: str) -> Optional[str]: ...


def _is_level(value) -> bool:
    """parent 参数是否为层级数（bool 不算）"""
    return isinstance(value, int) and not isinstance(value, bool)


class TreeCodeGenerator:
    """树形编码生成器

    只持有一份不可变配置（code_length），所有方法都是纯函数，
    可以在多线程中共享同一个实例。

    参数非法（必填编码为空、parent_level 超出层级）时抛出
    InvalidArgumentException；其它输入（非数字的末级编码、
    不匹配的父编码前缀、超出宽度的序号）不做校验，由调用方保证。
    """

    def __init__(self, settings: Optional[TreeCodeSettings] = None):
        """
        Args:
            settings: 编码配置，为空时从环境变量读取（YTREE_CODE_LENGTH 等）
        """
        self._settings = settings or TreeCodeSettings()

    @classmethod
    def from_code_length(cls, code_length: int) -> "TreeCodeGenerator":
        """按编码宽度创建生成器"""
        return cls(TreeCodeSettings(code_length=code_length))

    @property
    def settings(self) -> TreeCodeSettings:
        return self._settings

    @property
    def code_length(self) -> int:
        """每级编码的固定宽度"""
        return self._settings.code_length

    @property
    def default_hyphen(self) -> str:
        """全称默认连接符"""
        return self._settings.hyphen

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code_length={self.code_length})"

    # ==================== 内部工具 ====================

    @staticmethod
    def _require(value, param_name: str):
        if not value:
            code_logger.warning("参数 %s 不能为空", param_name)
            raise Err.invalid_argument(param_name, f"{param_name} 不能为空")

    def _resolve_hyphen(self, hyphen: Optional[str]) -> str:
        return self.default_hyphen if hyphen is None else hyphen

    def _format_number(self, number: int) -> str:
        """补零到固定宽度，负数在符号后补零；超出宽度时原样保留"""
        digits = str(abs(int(number))).zfill(self.code_length)
        return f"-{digits}" if number < 0 else digits

    @staticmethod
    def _remove_by_level(value: str, parent_level: int, separator: str) -> Optional[str]:
        # 空分隔符不拆分，整个值视为一级
        parts = value.split(separator) if separator else [value]
        if parent_level > len(parts):
            code_logger.warning(
                "parent_level=%s 超出层级数 %s: %r", parent_level, len(parts), value
            )
            raise Err.invalid_argument(
                "parent_level",
                "parent_level 超出编码层级",
                details=[f"parent_level={parent_level}", f"levels={len(parts)}"],
            )
        return separator.join(parts[max(parent_level, 0):]) or None

    # ==================== 编码生成 ====================

    def create_code(self, *numbers: Union[int, Iterable[int]]) -> Optional[str]:
        """根据各级序号生成编码

        支持可变参数或单个可迭代对象：
            create_code(1, 2)     -> "00001.00002"
            create_code([1, 2])   -> "00001.00002"
            create_code()         -> None

        Args:
            numbers: 各级序号（从 1 开始）

        Returns:
            编码字符串，没有序号时返回 None
        """
        if len(numbers) == 1 and not _is_level(numbers[0]) and numbers[0] is not None:
            numbers = tuple(numbers[0])
        if not numbers or numbers == (None,):
            return None
        return CODE_SEPARATOR.join(self._format_number(number) for number in numbers)

    def merge_code(self, parent_code: Optional[str], child_code: str) -> str:
        """合并父编码与子编码

        例: parent_code="00001", child_code="00002" 返回 "00001.00002"

        Args:
            parent_code: 父编码，父节点是根时可为空
            child_code: 子编码

        Raises:
            InvalidArgumentException: child_code 为空
        """
        self._require(child_code, "child_code")
        if not parent_code:
            return child_code
        return parent_code + CODE_SEPARATOR + child_code

    def merge_full_name(
        self,
        parent_full_name: Optional[str],
        child_full_name: str,
        hyphen: Optional[str] = None,
    ) -> str:
        """合并父全称与子全称，规则同 merge_code

        例: parent_full_name="研发中心", child_full_name="平台部", hyphen="-"
        返回 "研发中心-平台部"

        Args:
            parent_full_name: 父全称，父节点是根时可为空
            child_full_name: 子全称
            hyphen: 连接符，为空时使用配置中的默认连接符

        Raises:
            InvalidArgumentException: child_full_name 为空
        """
        self._require(child_full_name, "child_full_name")
        if not parent_full_name:
            return child_full_name
        return parent_full_name + self._resolve_hyphen(hyphen) + child_full_name

    # ==================== 去除父级 ====================

    def remove_parent_code(self, code: str, parent: Union[str, int, None]) -> Optional[str]:
        """去除编码中的父级部分

        parent 为字符串时按父编码去除，为整数时按层级数去除：
            remove_parent_code("00001.00002.00003", "00001")  -> "00002.00003"
            remove_parent_code("00001.00002.00003", 2)        -> "00003"

        按父编码去除时假定 code 以 parent_code + "." 开头，不做校验。

        Args:
            code: 编码
            parent: 父编码或父级层级数

        Raises:
            InvalidArgumentException: code 为空，或层级数超出编码层级
        """
        if _is_level(parent):
            return self.remove_parent_code_by_level(code, parent)

        self._require(code, "code")
        if not parent:
            return code
        if len(code) == len(parent):
            return None
        return code[len(parent) + len(CODE_SEPARATOR):]

    def remove_parent_code_by_level(self, code: str, parent_level: int) -> Optional[str]:
        """去除编码的前 parent_level 级

        Returns:
            剩余编码，全部去除时返回 None

        Raises:
            InvalidArgumentException: code 为空，或 parent_level 大于编码层级数
        """
        self._require(code, "code")
        return self._remove_by_level(code, parent_level, CODE_SEPARATOR)

    def remove_parent_full_name(
        self,
        full_name: str,
        parent: Union[str, int, None],
        hyphen: Optional[str] = None,
    ) -> Optional[str]:
        """去除全称中的父级部分，规则同 remove_parent_code

        连接符可以是多个字符，按父全称去除时截掉 len(parent) + len(hyphen) 个字符。

        Args:
            full_name: 全称
            parent: 父全称或父级层级数
            hyphen: 连接符，为空时使用配置中的默认连接符

        Raises:
            InvalidArgumentException: full_name 为空，或层级数超出全称层级
        """
        if _is_level(parent):
            return self.remove_parent_full_name_by_level(full_name, parent, hyphen)

        self._require(full_name, "full_name")
        if not parent:
            return full_name
        if len(full_name) == len(parent):
            return None
        return full_name[len(parent) + len(self._resolve_hyphen(hyphen)):]

    def remove_parent_full_name_by_level(
        self,
        full_name: str,
        parent_level: int,
        hyphen: Optional[str] = None,
    ) -> Optional[str]:
        """去除全称的前 parent_level 级

        Raises:
            InvalidArgumentException: full_name 为空，或 parent_level 大于全称层级数
        """
        self._require(full_name, "full_name")
        return self._remove_by_level(full_name, parent_level, self._resolve_hyphen(hyphen))

    # ==================== 编码分解 ====================

    def get_next_code(self, code: str) -> str:
        """获取同级的下一个编码

        例: code="00001.00001" 返回 "00001.00002"

        末级序号加一后超出 code_length 时不报错，编码会比固定宽度更长。

        Raises:
            InvalidArgumentException: code 为空
            ValueError: 末级编码不是数字
        """
        self._require(code, "code")

        parent_code = self.get_parent_code(code)
        last_code = self.get_last_code(code)
        next_code = self.merge_code(parent_code, self.create_code(int(last_code) + 1))
        code_logger.debug("next code of %s: %s", code, next_code)
        return next_code

    def get_last_code(self, code: str) -> str:
        """获取末级编码

        例: code="00001.00002.00003" 返回 "00003"
        """
        self._require(code, "code")
        return code.split(CODE_SEPARATOR)[-1]

    def get_parent_code(self, code: str) -> Optional[str]:
        """获取父编码

        例: code="00001.00002.00003" 返回 "00001.00002"

        Returns:
            父编码，code 只有一级时返回 None（父节点是根）
        """
        self._require(code, "code")
        parts = code.split(CODE_SEPARATOR)
        if len(parts) == 1:
            return None
        return CODE_SEPARATOR.join(parts[:-1])


def create_code_generator(
    settings: Optional[TreeCodeSettings] = None,
    config_path: Optional[str] = None,
    base_dir: Optional[str] = None,
    **overrides,
) -> TreeCodeGenerator:
    """创建编码生成器

    配置来源优先级: settings > config_path 中的 tree_code 节 > 环境变量 > 默认值

    Args:
        settings: 编码配置对象
        config_path: YAML 配置文件路径
        base_dir: 配置文件基础目录
        **overrides: 覆盖配置的参数，如 code_length=6

    使用示例:
        generator = create_code_generator(config_path="config/settings.yaml")
        generator = create_code_generator(code_length=4)
    """
    if settings is None:
        if config_path is not None:
            settings = load_yaml_config(
                config_path, TreeCodeSettings, base_dir=base_dir, section="tree_code", **overrides
            )
        else:
            settings = TreeCodeSettings(**overrides)

    code_logger.debug("创建编码生成器: code_length=%s", settings.code_length)
    return TreeCodeGenerator(settings)
