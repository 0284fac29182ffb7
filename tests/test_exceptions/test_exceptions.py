"""异常类测试"""

import pytest

from ytree.exceptions import (
    BusinessException,
    Err,
    ErrorCode,
    InvalidArgumentException,
    ValidationException,
)


class TestInvalidArgumentException:
    def test_hierarchy(self):
        exc = InvalidArgumentException("code")
        assert isinstance(exc, ValidationException)
        assert isinstance(exc, BusinessException)
        assert isinstance(exc, ValueError)

    def test_default_message_and_code(self):
        exc = InvalidArgumentException("child_code")
        assert exc.message == "child_code 不能为空"
        assert str(exc) == "child_code 不能为空"
        assert exc.code == ErrorCode.INVALID_ARGUMENT
        assert exc.status_code == 422
        assert exc.param_name == "child_code"

    def test_to_dict_contains_param_name(self):
        exc = InvalidArgumentException("parent_level", "parent_level 超出编码层级", details=["levels=2"])
        data = exc.to_dict()
        assert data["message"] == "parent_level 超出编码层级"
        assert data["code"] == "INVALID_ARGUMENT"
        assert data["details"] == ["levels=2"]
        assert data["extra"] == {"param_name": "parent_level"}

    def test_to_dict_returns_copies(self):
        exc = InvalidArgumentException("code", details=["a"])
        exc.to_dict()["details"].append("b")
        assert exc.details == ["a"]

    def test_catch_as_value_error(self):
        with pytest.raises(ValueError):
            raise InvalidArgumentException("code")


class TestErr:
    def test_invalid_argument(self):
        exc = Err.invalid_argument("code")
        assert isinstance(exc, InvalidArgumentException)
        assert exc.param_name == "code"

    def test_invalid(self):
        exc = Err.invalid(details=["code_length 必须大于 0"])
        assert type(exc) is ValidationException
        assert exc.code == ErrorCode.VALIDATION_ERROR
        assert exc.status_code == 422

    def test_fail(self):
        exc = Err.fail()
        assert type(exc) is BusinessException
        assert exc.message == "操作失败"
        assert exc.status_code == 400

    def test_repr(self):
        exc = Err.fail("出错了", code="MY_ERROR")
        assert repr(exc) == "BusinessException(message='出错了', code='MY_ERROR', status_code=400)"


class TestErrorCode:
    def test_members(self):
        assert {member.value for member in ErrorCode} == {
            "BUSINESS_ERROR",
            "VALIDATION_ERROR",
            "INVALID_ARGUMENT",
        }
