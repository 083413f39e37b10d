"""
GitHub Trending 抓取模块

获取 GitHub Trending 页面并解析为 TrendingEntry 列表。

页面结构变化时只需要修改 iter_result_blocks() 中的区块定位规则，
各字段的提取函数只作用于单个区块。
"""

import logging
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator, List, Optional
from urllib.parse import urlencode

import requests
from bs4 import BeautifulSoup
from bs4.element import Tag

logger = logging.getLogger(__name__)


TRENDING_URL = "https://github.com/trending"
GITHUB_URL = "https://github.com"

HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
    "Accept": "text/html",
}


# ============================================================================
# 数据结构
# ============================================================================

@dataclass(frozen=True)
class TrendingEntry:
    """GitHub Trending 项目信息"""
    owner: str                   # 仓库所有者
    name: str                    # 仓库名称
    description: str = ""        # 项目描述
    language: str = ""           # 主要语言
    stars: int = 0               # Star 数量
    forks: int = 0               # Fork 数量
    stars_gained: Optional[int] = None  # 时间段内新增 Star, None 表示页面未提供

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    @property
    def url(self) -> str:
        return f"{GITHUB_URL}/{self.owner}/{self.name}"


# ============================================================================
# 数字解析
# ============================================================================

_NUMBER_RE = re.compile(r"(\d+(?:\.\d*)?)\s*([kK])?")


def parse_count(text: Optional[str]) -> Optional[int]:
    """
    解析页面上的计数文本

    去掉空白和千位分隔符，"k" 后缀按 1000 倍精确换算 (使用 Decimal，
    不做字符串补零)，换算后的小数部分向零截断。

        "1,234"            -> 1234
        "2.5k"             -> 2500
        "1.2345k"          -> 1234
        "3.k"              -> 3000
        "1,234 stars today" -> 1234

    Args:
        text: 原始文本

    Returns:
        解析出的整数; 无法解析时返回 None，由调用方决定默认值
    """
    if not text:
        return None

    cleaned = re.sub(r"[\s,]", "", text)
    match = _NUMBER_RE.search(cleaned)
    if not match:
        return None

    value = Decimal(match.group(1))

    if match.group(2):
        value *= 1000

    return int(value)


# ============================================================================
# 区块定位与字段提取
# ============================================================================

_REPO_PATH_RE = re.compile(r"^/([^/?#\s]+)/([^/?#\s]+)$")
_GAINED_RE = re.compile(r"stars?\s+(today|this\s+week|this\s+month)", re.IGNORECASE)


def iter_result_blocks(html: str) -> Iterator[Tag]:
    """按页面顺序返回每个独立的 Trending 项目区块"""
    soup = BeautifulSoup(html, "html.parser")
    yield from soup.select("article.Box-row")


def _extract_repo_path(block: Tag) -> Optional[tuple]:
    """从区块中找到第一个形如 /owner/name 的相对链接"""
    heading_links = block.select("h1 a[href], h2 a[href]")
    for link in heading_links + block.find_all("a", href=True):
        match = _REPO_PATH_RE.match(link["href"].strip())
        if match:
            return match.group(1), match.group(2)
    return None


def _extract_description(block: Tag) -> str:
    desc_elem = block.select_one("p.col-9") or block.find("p")
    if not desc_elem:
        return ""
    return " ".join(desc_elem.get_text(" ").split())


def _extract_language(block: Tag) -> str:
    lang_elem = block.select_one("[itemprop='programmingLanguage']")
    return lang_elem.get_text().strip() if lang_elem else ""


def _extract_link_count(block: Tag, owner: str, name: str, suffix: str) -> int:
    """解析 /owner/name/stargazers 或 /owner/name/forks 链接中的数字"""
    target = f"/{owner}/{name}/{suffix}"
    for link in block.find_all("a", href=True):
        if link["href"].strip() == target:
            count = parse_count(link.get_text())
            return count if count is not None else 0
    return 0


def _extract_stars_gained(block: Tag) -> Optional[int]:
    for span in block.find_all("span"):
        text = span.get_text(" ")
        if not _GAINED_RE.search(text):
            continue
        # 取最内层的 span，避免外层容器中的其他数字
        if any(_GAINED_RE.search(inner.get_text(" ")) for inner in span.find_all("span")):
            continue
        return parse_count(text)
    return None


def parse_trending_block(block: Tag) -> Optional[TrendingEntry]:
    """
    解析单个 Trending 区块

    缺失的可选字段使用默认值; 找不到 owner/name 链接的区块不是项目，返回 None
    """
    repo_path = _extract_repo_path(block)
    if not repo_path:
        return None

    owner, name = repo_path
    return TrendingEntry(
        owner=owner,
        name=name,
        description=_extract_description(block),
        language=_extract_language(block),
        stars=_extract_link_count(block, owner, name, "stargazers"),
        forks=_extract_link_count(block, owner, name, "forks"),
        stars_gained=_extract_stars_gained(block),
    )


def parse_trending_html(html: str) -> List[TrendingEntry]:
    """解析 Trending 页面，结果顺序与页面区块顺序一致"""
    entries = []
    for block in iter_result_blocks(html):
        entry = parse_trending_block(block)
        if entry:
            entries.append(entry)
        else:
            logger.debug("跳过非项目区块")
    return entries


# ============================================================================
# 抓取函数
# ============================================================================

def build_trending_url(
    language: str = "",
    since: str = "daily",
    spoken_language: str = "",
) -> str:
    """
    构建 Trending 页面 URL

    Args:
        language: 编程语言 (python/javascript/...)，空字符串表示全部
        since: 时间范围 (daily/weekly/monthly)
        spoken_language: 自然语言代码 (en/zh/...)，空字符串表示全部
    """
    url = TRENDING_URL
    if language:
        url += f"/{language}"

    params = {"since": since}
    if spoken_language:
        params["spoken_language_code"] = spoken_language

    return f"{url}?{urlencode(params)}"


def fetch_trending_page(
    url: str,
    session: Optional[requests.Session] = None,
    timeout: int = 30,
) -> str:
    """
    下载 Trending 页面

    非 2xx 状态抛出 requests.HTTPError，网络错误抛出 requests.RequestException，
    均不重试
    """
    http = session or requests
    logger.info(f"抓取 GitHub Trending: {url}")

    response = http.get(url, headers=HEADERS, timeout=timeout)
    response.raise_for_status()
    return response.text


def fetch_trending(
    language: str = "",
    since: str = "daily",
    spoken_language: str = "",
    session: Optional[requests.Session] = None,
    timeout: int = 30,
) -> List[TrendingEntry]:
    """
    抓取并解析 GitHub Trending 项目

    Returns:
        TrendingEntry 列表，顺序与页面一致
    """
    url = build_trending_url(language, since, spoken_language)
    html = fetch_trending_page(url, session=session, timeout=timeout)

    entries = parse_trending_html(html)
    logger.info(f"获取到 {len(entries)} 个 Trending 项目")
    return entries
