"""
GitHub Trending Daily 主流程

抓取 Trending -> 解析 -> LLM 总结 -> 渲染 -> 邮件推送，严格顺序执行，
任一步骤失败立即终止本次运行
"""

import logging
import sys
from datetime import date, datetime
from typing import Optional

from . import fetcher, notifier, renderer, summarizer
from .config import Settings, get_settings

logger = logging.getLogger(__name__)


def run(settings: Settings, today: Optional[date] = None) -> int:
    """
    执行一次完整推送

    Args:
        settings: 配置
        today: 邮件中使用的日期，默认当天

    Returns:
        退出码 (成功或没有项目时为 0)
    """
    today = today or date.today()

    # 1. 获取 Trending 项目
    logger.info("步骤 1/3: 获取 GitHub Trending...")
    entries = fetcher.fetch_trending(
        language=settings.trending_language,
        since=settings.trending_since,
        spoken_language=settings.trending_spoken_language,
        timeout=settings.request_timeout,
    )

    if not entries:
        logger.warning("没有获取到任何 Trending 项目，本次不发送邮件")
        return 0

    # 2. LLM 总结
    logger.info("步骤 2/3: LLM 生成总结...")
    summary = summarizer.summarize_entries(entries, settings=settings, today=today)

    # 3. 渲染并发送邮件
    logger.info("步骤 3/3: 发送邮件...")
    html = renderer.render_email(summary, today)
    notifier.send_digest(html, today, settings=settings)

    return 0


def main():
    """主函数"""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )

    logger.info("=" * 50)
    logger.info(f"GitHub Trending Daily 启动 - {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    logger.info("=" * 50)

    try:
        settings = get_settings()
        logging.getLogger().setLevel(settings.log_level.upper())
        exit_code = run(settings)
    except Exception as e:
        logger.exception(f"运行出错: {e}")
        sys.exit(1)

    logger.info("=" * 50)
    logger.info("GitHub Trending Daily 运行结束")
    logger.info("=" * 50)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
