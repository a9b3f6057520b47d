"""请求构建器单元测试"""

import dataclasses
from unittest.mock import Mock

import pytest

from core.exceptions import InvalidArgumentError
from core.models import UNSET, Language, RequestDraft, WordRequest
from services.http_service import HttpTransport
from services.request_builder import (
    new_request,
    with_language,
    with_length,
    with_number,
    with_transport,
)


def stub_transport(request):
    raise AssertionError("transport should not be called")


class TestOptions:
    """单个配置项测试类"""

    def test_with_number(self):
        """测试设置数量"""
        draft = RequestDraft()
        with_number(5)(draft)
        assert draft.number == 5

    @pytest.mark.parametrize("n", [0, -1, -100])
    def test_with_number_invalid(self, n):
        """测试数量小于 1"""
        draft = RequestDraft()
        with pytest.raises(InvalidArgumentError) as exc_info:
            with_number(n)(draft)
        assert exc_info.value.field == "number"
        assert str(exc_info.value) == "number must be greater than 0"
        assert draft.number == UNSET

    @pytest.mark.parametrize("n", [1.5, "3", True, None])
    def test_with_number_not_int(self, n):
        """测试数量不是整数"""
        with pytest.raises(InvalidArgumentError):
            with_number(n)(RequestDraft())

    def test_with_length(self):
        """测试设置长度"""
        draft = RequestDraft()
        with_length(8)(draft)
        assert draft.length == 8

    def test_with_length_invalid(self):
        """测试长度小于 1"""
        draft = RequestDraft()
        with pytest.raises(InvalidArgumentError) as exc_info:
            with_length(0)(draft)
        assert exc_info.value.field == "length"
        assert draft.length == UNSET

    @pytest.mark.parametrize("language", list(Language))
    def test_with_language_enum(self, language):
        """测试使用枚举设置语言"""
        draft = RequestDraft()
        with_language(language)(draft)
        assert draft.language is language

    @pytest.mark.parametrize(
        "code, expected",
        [
            ("", Language.ENGLISH),
            ("es", Language.SPANISH),
            ("it", Language.ITALIAN),
            ("de", Language.GERMAN),
            ("fr", Language.FRENCH),
            ("zh", Language.CHINESE),
            ("pt-br", Language.BRAZILIAN_PORTUGUESE),
        ],
    )
    def test_with_language_code(self, code, expected):
        """测试使用语言代码设置语言"""
        draft = RequestDraft()
        with_language(code)(draft)
        assert draft.language is expected

    @pytest.mark.parametrize("code", ["en", "ja", "ES", "pt", None])
    def test_with_language_unsupported(self, code):
        """测试不支持的语言"""
        draft = RequestDraft()
        with pytest.raises(InvalidArgumentError) as exc_info:
            with_language(code)(draft)
        assert exc_info.value.field == "language"
        assert draft.language is Language.ENGLISH

    def test_with_transport(self):
        """测试替换传输层"""
        draft = RequestDraft()
        with_transport(stub_transport)(draft)
        assert draft.transport is stub_transport

    @pytest.mark.parametrize("transport", [None, "http"])
    def test_with_transport_invalid(self, transport):
        """测试传输层为空或不可调用"""
        with pytest.raises(InvalidArgumentError) as exc_info:
            with_transport(transport)(RequestDraft())
        assert exc_info.value.field == "transport"


class TestNewRequest:
    """new_request 测试类"""

    def test_defaults(self):
        """测试默认值"""
        request = new_request(with_transport(stub_transport))
        assert request.number == UNSET
        assert request.length == UNSET
        assert request.language is Language.ENGLISH
        assert request.transport is stub_transport
        assert not request.has_number
        assert not request.has_length

    def test_default_transport(self):
        """测试未指定传输层时使用默认 HTTP 传输层"""
        request = new_request()
        assert isinstance(request.transport, HttpTransport)

    def test_all_options(self):
        """测试组合配置项"""
        request = new_request(
            with_number(3),
            with_length(5),
            with_language(Language.GERMAN),
            with_transport(stub_transport),
        )
        assert request == WordRequest(
            transport=stub_transport,
            number=3,
            length=5,
            language=Language.GERMAN,
        )

    def test_later_option_wins(self):
        """测试同一字段后设置的值生效"""
        request = new_request(
            with_number(3), with_number(9), with_transport(stub_transport)
        )
        assert request.number == 9

    @pytest.mark.parametrize(
        "option, field",
        [
            (with_number(0), "number"),
            (with_length(0), "length"),
            (with_language("xx"), "language"),
            (with_transport(None), "transport"),
        ],
    )
    def test_invalid_option(self, option, field):
        """测试非法配置项导致构建失败"""
        with pytest.raises(InvalidArgumentError) as exc_info:
            new_request(option)
        assert exc_info.value.field == field

    def test_fail_fast(self):
        """测试第一个失败的配置项之后不再执行"""
        later = Mock()
        with pytest.raises(InvalidArgumentError) as exc_info:
            new_request(with_length(0), with_number(0), later)
        assert exc_info.value.field == "length"
        later.assert_not_called()

    def test_invalid_number_never_sends(self):
        """测试配置失败时不会发送请求"""
        transport = Mock()
        with pytest.raises(InvalidArgumentError):
            new_request(with_transport(transport), with_number(-1))
        transport.assert_not_called()

    def test_request_is_immutable(self):
        """测试构建结果不可修改"""
        request = new_request(with_transport(stub_transport))
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.number = 10
