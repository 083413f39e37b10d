"""GitHub Trending Daily: 每日抓取 GitHub Trending，LLM 总结后邮件推送"""

__version__ = "0.1.0"
