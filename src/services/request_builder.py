"""请求构建器

通过一组可组合的配置项构建不可变的 WordRequest。
"""

from typing import Optional, Union

from core.exceptions import InvalidArgumentError
from core.interfaces import Transport
from core.models import Language, Option, RequestDraft, WordRequest


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


def with_number(n: int) -> Option:
    """设置返回的单词数量"""

    def apply(draft: RequestDraft) -> None:
        if not _is_positive_int(n):
            raise InvalidArgumentError("number")
        draft.number = n

    return apply


def with_length(length: int) -> Option:
    """设置返回单词的长度"""

    def apply(draft: RequestDraft) -> None:
        if not _is_positive_int(length):
            raise InvalidArgumentError("length")
        draft.length = length

    return apply


def with_language(code: Union[Language, str]) -> Option:
    """设置返回单词的语言

    Args:
        code: Language 枚举成员或其语言代码（如 "es"）
    """

    def apply(draft: RequestDraft) -> None:
        if isinstance(code, Language):
            draft.language = code
            return
        try:
            draft.language = Language(code)
        except ValueError as e:
            raise InvalidArgumentError("language") from e

    return apply


def with_transport(transport: Optional[Transport]) -> Option:
    """替换执行 HTTP 请求的传输层"""

    def apply(draft: RequestDraft) -> None:
        if transport is None or not callable(transport):
            raise InvalidArgumentError("transport")
        draft.transport = transport

    return apply


def new_request(*options: Option) -> WordRequest:
    """按顺序应用配置项并创建请求

    遇到第一个校验失败的配置项时立即停止，后续配置项不再执行。

    Args:
        *options: 配置项

    Returns:
        不可变的 WordRequest

    Raises:
        InvalidArgumentError: 配置项校验失败
    """
    draft = RequestDraft()
    for option in options:
        option(draft)

    if draft.transport is None:
        from services.http_service import default_transport

        draft.transport = default_transport()

    return draft.freeze()


__all__ = [
    "new_request",
    "with_number",
    "with_length",
    "with_language",
    "with_transport",
]
