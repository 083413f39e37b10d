"""
GitHub Trending Daily 配置管理模块

使用 pydantic-settings 管理环境变量配置，启动时读取一次，运行期间不再重新读取
"""

from typing import Literal
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """应用配置类"""

    # 邮件配置
    recipient_email: str = Field(..., alias="RECIPIENT_EMAIL")
    from_email: str = Field(default="noreply@yourdomain.com", alias="FROM_EMAIL")
    resend_api_key: str = Field(..., alias="RESEND_API_KEY")

    # Trending 筛选配置 (空字符串表示不过滤)
    trending_language: str = Field(default="", alias="TRENDING_LANGUAGE")
    trending_since: Literal["daily", "weekly", "monthly"] = Field(
        default="daily",
        alias="TRENDING_SINCE",
    )
    trending_spoken_language: str = Field(default="", alias="TRENDING_SPOKEN_LANGUAGE")
    request_timeout: int = Field(default=30, alias="REQUEST_TIMEOUT")

    # LLM API 配置 (兼容 OpenAI 协议的任意服务)
    llm_api_key: str = Field(..., alias="LLM_API_KEY")
    llm_base_url: str = Field(
        default="https://api.openai.com/v1",
        alias="LLM_BASE_URL"
    )
    llm_model: str = Field(default="gpt-4o-mini", alias="LLM_MODEL")
    llm_max_tokens: int = Field(default=4096, alias="LLM_MAX_TOKENS")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    """获取配置实例"""
    return Settings()

