"""
GitHub Trending LLM 总结模块

把完整的项目列表交给 LLM，一次请求生成整份每日总结
"""

import logging
import re
from datetime import date
from typing import List, Optional

from openai import OpenAI

from .config import Settings, get_settings
from .fetcher import TrendingEntry

logger = logging.getLogger(__name__)


class SummarizationError(RuntimeError):
    """LLM 响应缺少可用内容"""


# ============================================================================
# LLM 客户端
# ============================================================================

def get_llm_client(settings: Optional[Settings] = None) -> OpenAI:
    """获取 LLM 客户端"""
    settings = settings or get_settings()
    return OpenAI(
        api_key=settings.llm_api_key,
        base_url=settings.llm_base_url,
    )


# ============================================================================
# Prompt 构建
# ============================================================================

SUMMARY_PROMPT = """请将以下 GitHub Trending 项目整理成一份简洁、易读的每日总结邮件。

要求：
1. 按类别/主题将项目分组
2. 对每个项目添加简短的中文点评（1-2句话）
3. 突出显示最值得关注的几个项目
4. 使用 HTML 格式，便于邮件展示
5. 风格要简洁、专业
6. 包含今天的日期: {today}

项目列表：
{projects}

请直接返回 HTML 内容，不要添加任何额外的解释文字。"""


# 时间范围对应的新增 Star 说明
PERIOD_LABELS = {
    "daily": "today",
    "weekly": "this week",
    "monthly": "this month",
}


def _format_entry(index: int, entry: TrendingEntry, period: str) -> str:
    gained = entry.stars_gained if entry.stars_gained is not None else "unknown"
    return "\n".join([
        f"{index}. {entry.full_name}",
        f"   语言: {entry.language or 'N/A'}",
        f"   Stars: {entry.stars:,} (+{gained} {period}) | Forks: {entry.forks:,}",
        f"   描述: {entry.description or '无描述'}",
        f"   链接: {entry.url}",
    ])


def format_entries(entries: List[TrendingEntry], since: str = "daily") -> str:
    """将项目列表序列化为编号文本，新增 Star 按 since 对应的时间范围标注"""
    period = PERIOD_LABELS.get(since, since)
    return "\n\n".join(
        _format_entry(i, entry, period) for i, entry in enumerate(entries, 1)
    )


def build_prompt(entries: List[TrendingEntry], today: date, since: str = "daily") -> str:
    return SUMMARY_PROMPT.format(
        today=today.isoformat(),
        projects=format_entries(entries, since),
    )


_FENCE_RE = re.compile(r"^\s*```[\w-]*\s*\n([\s\S]*?)\n?```\s*$")


def _strip_code_fence(content: str) -> str:
    """去掉 LLM 偶尔包在外层的 ```html 代码块标记"""
    match = _FENCE_RE.match(content)
    if match:
        return match.group(1).strip()
    return content.strip()


# ============================================================================
# 总结函数
# ============================================================================

def summarize_entries(
    entries: List[TrendingEntry],
    settings: Optional[Settings] = None,
    client: Optional[OpenAI] = None,
    today: Optional[date] = None,
) -> str:
    """
    使用 LLM 生成每日总结

    单次请求，不重试; SDK 抛出的异常原样向上传递

    Args:
        entries: Trending 项目列表
        settings: 配置，默认读取环境变量
        client: OpenAI 客户端，默认按配置创建
        today: 总结中使用的日期

    Returns:
        LLM 生成的总结文本 (通常是 HTML)

    Raises:
        SummarizationError: 响应中没有可用的文本
    """
    settings = settings or get_settings()
    client = client or get_llm_client(settings)
    today = today or date.today()

    prompt = build_prompt(entries, today, settings.trending_since)
    logger.info(f"调用 LLM 生成总结: model={settings.llm_model}, 项目数={len(entries)}")

    response = client.chat.completions.create(
        model=settings.llm_model,
        messages=[
            {"role": "user", "content": prompt},
        ],
        max_tokens=settings.llm_max_tokens,
    )

    if not response.choices:
        raise SummarizationError("LLM 响应中没有 choices")

    content = response.choices[0].message.content
    if not content or not content.strip():
        raise SummarizationError("LLM 返回了空内容")

    logger.info(f"LLM 响应: {content[:50]}...")
    return _strip_code_fence(content)
