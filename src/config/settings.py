"""配置管理模块 - 使用 Pydantic

集中管理所有配置项，支持环境变量、.env 文件和配置验证。
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """应用配置"""

    model_config = SettingsConfigDict(
        env_prefix="RANDOMWORD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 日志级别
    log_level: str = Field(default="INFO", description="日志级别")

    @field_validator("log_level", mode="after")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        """确保日志级别合法"""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level


class HttpConfig(BaseSettings):
    """HTTP 传输配置"""

    model_config = SettingsConfigDict(
        env_prefix="RANDOMWORD_HTTP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 请求超时（秒）
    timeout: int = Field(default=30, ge=1, le=300, description="HTTP 请求超时时间（秒）")

    # SSL 验证
    verify_ssl: bool = Field(default=True, description="是否验证 SSL 证书")

    user_agent: str = Field(
        default="randomword-python/0.1.0", description="User-Agent 请求头"
    )


class Config(BaseSettings):
    """全局配置"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    app: AppConfig = Field(default_factory=AppConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)


# 默认配置实例
default_config = Config()
