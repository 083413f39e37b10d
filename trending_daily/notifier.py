"""
GitHub Trending Daily 邮件推送模块

通过 Resend 事务邮件 API 把渲染好的 HTML 发送给配置的收件人。
只发送一次，任何失败都直接抛出，由入口统一处理。
"""

import logging
from datetime import date
from typing import Optional

import resend

from .config import Settings, get_settings

logger = logging.getLogger(__name__)


SUBJECT_PREFIX = "GitHub Trending 每日总结"


class DeliveryError(RuntimeError):
    """邮件服务没有返回投递确认"""


def build_subject(today: date) -> str:
    """邮件标题，日期格式与 zh-CN 短日期一致 (2026/10/18)"""
    return f"{SUBJECT_PREFIX} - {today.year}/{today.month}/{today.day}"


class EmailNotifier:
    """
    Resend 邮件通知器

    配置项 (.env):
    - RESEND_API_KEY: Resend API Key
    - FROM_EMAIL: 发件人地址 (需要在 Resend 验证过的域名下)
    - RECIPIENT_EMAIL: 收件人地址
    """

    def __init__(self, api_key: str, from_email: str, recipient: str):
        self.api_key = api_key
        self.from_email = from_email
        self.recipient = recipient

    def send(self, subject: str, html: str) -> dict:
        """
        发送单封邮件

        Args:
            subject: 邮件标题
            html: 邮件 HTML 正文

        Returns:
            Resend 返回的响应 (包含邮件 id)

        Raises:
            resend.exceptions.ResendError: API 返回错误
            DeliveryError: 响应中没有邮件 id
        """
        resend.api_key = self.api_key
        params: resend.Emails.SendParams = {
            "from": self.from_email,
            "to": [self.recipient],
            "subject": subject,
            "html": html,
        }

        logger.info(f"发送邮件到 {self.recipient}...")
        result = resend.Emails.send(params)

        if not result or not result.get("id"):
            raise DeliveryError(f"Resend 没有返回邮件 id: {result}")

        logger.info(f"邮件发送成功: id={result['id']}")
        return result


def send_digest(html: str, today: date, settings: Optional[Settings] = None) -> dict:
    """
    发送每日总结邮件

    Args:
        html: 渲染好的邮件 HTML
        today: 标题中使用的日期
        settings: 配置，默认读取环境变量

    Returns:
        Resend 的响应
    """
    settings = settings or get_settings()
    notifier = EmailNotifier(
        api_key=settings.resend_api_key,
        from_email=settings.from_email,
        recipient=settings.recipient_email,
    )
    return notifier.send(build_subject(today), html)
