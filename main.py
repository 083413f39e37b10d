"""
GitHub Trending Daily 主入口

每日自动获取 GitHub Trending 项目、LLM 总结并通过邮件推送
"""

from trending_daily.pipeline import main


if __name__ == "__main__":
    main()
