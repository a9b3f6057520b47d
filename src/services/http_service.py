"""HTTP 传输服务

提供基于 requests 的默认传输实现。
"""

from threading import Lock
from typing import Optional

import requests
import urllib3

from config.settings import HttpConfig, default_config


class HttpTransport:
    """基于 requests.Session 的传输层"""

    def __init__(
        self,
        config: Optional[HttpConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        """初始化传输层

        Args:
            config: HTTP 配置（默认使用全局配置）
            session: 可选的 requests.Session 实例
        """
        self.config = config or default_config.http
        self.session = session or self._create_session()

        # 只在禁用 SSL 验证时才禁用警告
        if not self.config.verify_ssl:
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    def _create_session(self) -> requests.Session:
        """创建 HTTP 会话"""
        session = requests.Session()
        session.verify = self.config.verify_ssl
        session.headers.update({"User-Agent": self.config.user_agent})
        return session

    def __call__(self, request: requests.PreparedRequest) -> requests.Response:
        """发送请求

        Args:
            request: 已准备好的请求

        Returns:
            未读取响应体的响应对象

        Raises:
            requests.RequestException: 网络错误
        """
        # 会话级请求头不会自动合并到 PreparedRequest
        for key, value in self.session.headers.items():
            request.headers.setdefault(key, value)
        return self.session.send(
            request,
            timeout=self.config.timeout,
            verify=self.config.verify_ssl,
            stream=True,
        )

    def close(self):
        """关闭会话"""
        self.session.close()


_default_transport: Optional[HttpTransport] = None
_default_lock = Lock()


def default_transport() -> HttpTransport:
    """获取共享的默认传输层（首次调用时创建）"""
    global _default_transport
    with _default_lock:
        if _default_transport is None:
            _default_transport = HttpTransport()
        return _default_transport
