"""核心接口定义

使用 Protocol 定义接口，支持鸭子类型和依赖注入。
"""

from typing import Protocol, runtime_checkable

import requests


@runtime_checkable
class TransportResponse(Protocol):
    """传输层响应接口（requests.Response 满足该接口）"""

    status_code: int

    @property
    def content(self) -> bytes:
        """读取完整响应体，读取失败时抛出异常"""
        ...

    def close(self) -> None:
        """释放响应资源"""
        ...


@runtime_checkable
class Transport(Protocol):
    """传输层接口：发送请求并返回响应"""

    def __call__(self, request: requests.PreparedRequest) -> TransportResponse:
        ...
