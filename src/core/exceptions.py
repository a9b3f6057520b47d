"""自定义异常类"""


class RandomWordError(Exception):
    """随机单词客户端基础异常"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidArgumentError(RandomWordError):
    """配置参数非法（只在构建请求时抛出）"""

    MESSAGES = {
        "number": "number must be greater than 0",
        "length": "length must be greater than 0",
        "language": "unsupported language",
        "transport": "transport cannot be None",
    }

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or self.MESSAGES.get(field, f"invalid {field}"))


class UnexpectedResponseError(RandomWordError):
    """服务端返回了非预期的响应"""

    def __init__(
        self,
        message: str = "unexpected response from server",
        status_code: int | None = None,
    ):
        self.status_code = status_code
        super().__init__(
            f"{message} (status {status_code})" if status_code is not None else message
        )


class InternalError(RandomWordError):
    """内部错误，携带原始异常"""

    def __init__(self, cause: BaseException, message: str = "internal error"):
        self.cause = cause
        super().__init__(f"{message}: {cause}")
