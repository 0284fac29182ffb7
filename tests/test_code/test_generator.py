"""TreeCodeGenerator 编码操作测试"""

import pytest

from ytree.code import TreeCodeGenerator, TreeCodeGeneratorProtocol
from ytree.config import TreeCodeSettings
from ytree.exceptions import ErrorCode, InvalidArgumentException


class TestCreateCode:
    def test_create_code_pads_each_level(self, generator):
        assert generator.create_code(1, 2) == "00001.00002"
        assert generator.create_code(1) == "00001"
        assert generator.create_code(12, 345, 6) == "00012.00345.00006"

    def test_create_code_accepts_iterable(self, generator):
        assert generator.create_code([1, 2]) == "00001.00002"
        assert generator.create_code((3,)) == "00003"
        assert generator.create_code(n for n in (1, 2, 3)) == "00001.00002.00003"

    def test_create_code_without_numbers_returns_none(self, generator):
        assert generator.create_code() is None
        assert generator.create_code([]) is None
        assert generator.create_code(None) is None

    def test_create_code_uses_configured_width(self):
        generator = TreeCodeGenerator.from_code_length(3)
        assert generator.create_code(1, 2) == "001.002"

    def test_create_code_overflow_keeps_all_digits(self):
        generator = TreeCodeGenerator.from_code_length(3)
        assert generator.create_code(12345) == "12345"
        assert generator.create_code(1, 1000) == "001.1000"

    def test_create_code_zero_and_negative(self, generator):
        assert generator.create_code(0) == "00000"
        assert generator.create_code(-1) == "-00001"


class TestMergeCode:
    def test_merge_code(self, generator):
        assert generator.merge_code("00001", "00002") == "00001.00002"
        assert generator.merge_code("00001.00002", "00003") == "00001.00002.00003"

    @pytest.mark.parametrize("parent", [None, ""])
    def test_merge_code_with_root_parent(self, generator, parent):
        assert generator.merge_code(parent, "00002") == "00002"
        assert generator.merge_code(parent, "00001.00002") == "00001.00002"

    @pytest.mark.parametrize("parent", [None, "", "00001", "00001.00002"])
    @pytest.mark.parametrize("child", [None, ""])
    def test_merge_code_requires_child(self, generator, parent, child):
        with pytest.raises(InvalidArgumentException) as exc_info:
            generator.merge_code(parent, child)
        assert exc_info.value.param_name == "child_code"
        assert exc_info.value.code == ErrorCode.INVALID_ARGUMENT


class TestRemoveParentCode:
    def test_remove_parent_code(self, generator):
        assert generator.remove_parent_code("00001.00002.00003", "00001") == "00002.00003"
        assert generator.remove_parent_code("00001.00002.00003", "00001.00002") == "00003"

    @pytest.mark.parametrize("parent", [None, ""])
    def test_remove_empty_parent_returns_code(self, generator, parent):
        assert generator.remove_parent_code("00001.00002", parent) == "00001.00002"

    def test_remove_parent_equal_to_code_returns_none(self, generator):
        assert generator.remove_parent_code("00001.00002", "00001.00002") is None

    def test_remove_parent_does_not_check_prefix(self, generator):
        # 父编码不是前缀时按长度截取，不报错
        assert generator.remove_parent_code("00001.00002.00003", "00009") == "00002.00003"

    @pytest.mark.parametrize("code", [None, ""])
    def test_remove_parent_requires_code(self, generator, code):
        with pytest.raises(InvalidArgumentException) as exc_info:
            generator.remove_parent_code(code, "00001")
        assert exc_info.value.param_name == "code"

    def test_remove_parent_by_level(self, generator):
        code = "00001.00002.00003"
        assert generator.remove_parent_code(code, 0) == code
        assert generator.remove_parent_code(code, 1) == "00002.00003"
        assert generator.remove_parent_code(code, 2) == "00003"
        assert generator.remove_parent_code_by_level(code, 2) == "00003"

    def test_remove_all_levels_returns_none(self, generator):
        assert generator.remove_parent_code("00001.00002", 2) is None

    def test_remove_parent_by_negative_level_removes_nothing(self, generator):
        assert generator.remove_parent_code("00001.00002", -1) == "00001.00002"
        assert generator.remove_parent_code_by_level("00001.00002", -3) == "00001.00002"

    def test_remove_parent_level_exceeding_depth_fails(self, generator):
        with pytest.raises(InvalidArgumentException) as exc_info:
            generator.remove_parent_code("00001.00002", 3)
        assert exc_info.value.param_name == "parent_level"

    @pytest.mark.parametrize("code", [None, ""])
    def test_remove_parent_by_level_requires_code(self, generator, code):
        with pytest.raises(InvalidArgumentException):
            generator.remove_parent_code_by_level(code, 0)

    def test_bool_parent_is_not_a_level(self, generator):
        # False 视为空父编码，而不是层级 0
        assert generator.remove_parent_code("00001.00002", False) == "00001.00002"


class TestNavigateCode:
    def test_get_next_code(self, generator):
        assert generator.get_next_code("00001.00001") == "00001.00002"
        assert generator.get_next_code("00001") == "00002"
        assert generator.get_next_code("00001.00009") == "00001.00010"

    def test_get_next_code_overflows_width(self):
        generator = TreeCodeGenerator.from_code_length(2)
        assert generator.get_next_code("01.99") == "01.100"

    def test_get_next_code_non_numeric_raises_value_error(self, generator):
        with pytest.raises(ValueError):
            generator.get_next_code("00001.abc")

    def test_get_last_code(self, generator):
        assert generator.get_last_code("00001.00002.00003") == "00003"
        assert generator.get_last_code("00001") == "00001"

    def test_get_parent_code(self, generator):
        assert generator.get_parent_code("00001.00002.00003") == "00001.00002"
        assert generator.get_parent_code("00001") is None

    @pytest.mark.parametrize("method", ["get_next_code", "get_last_code", "get_parent_code"])
    @pytest.mark.parametrize("code", [None, ""])
    def test_navigation_requires_code(self, generator, method, code):
        with pytest.raises(InvalidArgumentException) as exc_info:
            getattr(generator, method)(code)
        assert exc_info.value.param_name == "code"

    @pytest.mark.parametrize("code", ["00001", "00001.00002", "00001.00002.00003.00004"])
    def test_parent_and_last_rebuild_code(self, generator, code):
        parent = generator.get_parent_code(code)
        last = generator.get_last_code(code)
        if parent is None:
            assert last == code
        else:
            assert generator.merge_code(parent, last) == code

    def test_parent_chain_terminates_at_depth(self, generator):
        code = generator.create_code(1, 2, 3, 4)
        steps = 0
        while code is not None:
            code = generator.get_parent_code(code)
            steps += 1
        assert steps == 4


class TestGeneratorConstruction:
    def test_default_settings(self):
        generator = TreeCodeGenerator()
        assert generator.code_length == 5
        assert generator.default_hyphen == "-"

    def test_settings_injected(self):
        generator = TreeCodeGenerator(TreeCodeSettings(code_length=4, hyphen="/"))
        assert generator.code_length == 4
        assert generator.default_hyphen == "/"
        assert generator.create_code(1, 2) == "0001.0002"

    def test_environment_width(self, monkeypatch):
        monkeypatch.setenv("YTREE_CODE_LENGTH", "6")
        assert TreeCodeGenerator().create_code(1) == "000001"

    def test_satisfies_protocol(self, generator):
        assert isinstance(generator, TreeCodeGeneratorProtocol)

    def test_repr(self, generator):
        assert repr(generator) == "TreeCodeGenerator(code_length=5)"
