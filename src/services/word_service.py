"""随机单词获取服务

构建请求 URL，调用传输层，校验响应并解析单词列表。
"""

import logging
from contextlib import closing
from urllib.parse import urlencode

import requests
from pydantic import StrictStr, TypeAdapter

from core.exceptions import InternalError, UnexpectedResponseError
from core.models import Option, WordRequest
from services.request_builder import new_request

BASE_URL = "https://random-word-api.herokuapp.com"
WORD_PATH = "/word"

_WORD_LIST = TypeAdapter(list[StrictStr])


def build_url(request: WordRequest) -> str:
    """生成请求 URL

    只有已设置的参数才会出现在查询字符串中，没有参数时不带 "?"。
    """
    endpoint = BASE_URL.rstrip("/") + WORD_PATH

    params: list[tuple[str, str]] = []
    if request.has_number:
        params.append(("number", str(request.number)))
    if request.has_length:
        params.append(("length", str(request.length)))
    if not request.language.is_default:
        params.append(("lang", request.language.code))

    if not params:
        return endpoint
    return f"{endpoint}?{urlencode(params)}"


def build_request(request: WordRequest) -> requests.PreparedRequest:
    """生成 GET 请求（无请求体）

    Raises:
        InternalError: 请求构建失败
    """
    try:
        return requests.Request("GET", build_url(request)).prepare()
    except Exception as e:
        raise InternalError(e, "failed to build request") from e


def fetch(request: WordRequest) -> list[str]:
    """获取随机单词

    每次调用只发送一次请求，不重试、不缓存。

    Args:
        request: 由 new_request 构建的请求

    Returns:
        服务端返回的单词列表（保持原顺序）

    Raises:
        InternalError: 请求构建、传输、读取响应体或解析 JSON 失败
        UnexpectedResponseError: 状态码不是 200，或响应体为空
    """
    prepared = build_request(request)
    logging.debug(f"Fetching words: {prepared.url}")

    try:
        response = request.transport(prepared)
    except Exception as e:
        raise InternalError(e, "transport failed") from e

    with closing(response):
        if response.status_code != requests.codes.ok:
            raise UnexpectedResponseError(status_code=response.status_code)

        try:
            body = response.content
        except Exception as e:
            raise InternalError(e, "failed to read response body") from e

        # 空响应体与空数组 "[]" 区分对待
        if not body:
            raise UnexpectedResponseError("empty response body", response.status_code)

        try:
            words = _WORD_LIST.validate_json(body)
        except ValueError as e:
            raise InternalError(e, "failed to decode response body") from e

    logging.debug(f"Fetched {len(words)} words")
    return words


def fetch_words(*options: Option) -> list[str]:
    """构建请求并立即获取单词"""
    return fetch(new_request(*options))
