"""核心数据模型

纯数据模型，不包含业务逻辑。
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from core.interfaces import Transport

# 未设置标记：交给服务端使用默认值
UNSET = -1


class Language(Enum):
    """支持的语言枚举"""

    ENGLISH = ""
    SPANISH = "es"
    ITALIAN = "it"
    GERMAN = "de"
    FRENCH = "fr"
    CHINESE = "zh"
    BRAZILIAN_PORTUGUESE = "pt-br"

    @property
    def code(self) -> str:
        return self.value

    @property
    def is_default(self) -> bool:
        """是否为默认语言（请求中不携带 lang 参数）"""
        return self is Language.ENGLISH


@dataclass(frozen=True)
class WordRequest:
    """随机单词请求（构建完成后不可变）"""

    transport: Transport
    number: int = UNSET
    length: int = UNSET
    language: Language = Language.ENGLISH

    @property
    def has_number(self) -> bool:
        return self.number > 0

    @property
    def has_length(self) -> bool:
        return self.length > 0


@dataclass
class RequestDraft:
    """构建中的请求，由配置项逐个修改"""

    transport: Optional[Transport] = None
    number: int = UNSET
    length: int = UNSET
    language: Language = Language.ENGLISH

    def freeze(self) -> WordRequest:
        """生成不可变的 WordRequest"""
        if self.transport is None:
            raise ValueError("transport is not set")
        return WordRequest(
            transport=self.transport,
            number=self.number,
            length=self.length,
            language=self.language,
        )


# 配置项：接受构建中的请求，校验失败时抛出 InvalidArgumentError
Option = Callable[[RequestDraft], None]
