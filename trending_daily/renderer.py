"""
邮件 HTML 渲染模块

把 LLM 生成的总结包装进固定的邮件模板 (标题、日期、正文、页脚)。
LLM 没有返回 HTML 时，对 Markdown 文本做简单的转换。
"""

import re
from datetime import date

WEEKDAYS = ["星期一", "星期二", "星期三", "星期四", "星期五", "星期六", "星期日"]

EMAIL_TITLE = "GitHub Trending 每日总结"

EMAIL_STYLE = """
    body {
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
      line-height: 1.6;
      color: #333;
      max-width: 600px;
      margin: 0 auto;
      padding: 20px;
      background-color: #f9f9f9;
    }
    .container {
      background-color: #ffffff;
      border-radius: 8px;
      padding: 30px;
      box-shadow: 0 2px 4px rgba(0,0,0,0.1);
    }
    h1 {
      color: #0366d6;
      border-bottom: 2px solid #0366d6;
      padding-bottom: 10px;
    }
    h2 {
      color: #24292e;
      margin-top: 25px;
    }
    h3 {
      color: #586069;
    }
    a {
      color: #0366d6;
      text-decoration: none;
    }
    .highlight {
      background-color: #fff8c5;
      padding: 15px;
      border-left: 4px solid #ffd33d;
      margin: 20px 0;
    }
    .repo-card {
      background-color: #f6f8fa;
      border: 1px solid #e1e4e8;
      border-radius: 6px;
      padding: 15px;
      margin: 10px 0;
    }
    .footer {
      text-align: center;
      color: #586069;
      font-size: 12px;
      margin-top: 30px;
      padding-top: 20px;
      border-top: 1px solid #e1e4e8;
    }
"""

EMAIL_FOOTER = [
    "本邮件由 GitHub Trending Daily 自动生成",
    "如需退订，请回复此邮件",
]


def format_date(today: date) -> str:
    """中文长日期，例如 2026年10月18日 星期日"""
    return f"{today.year}年{today.month}月{today.day}日 {WEEKDAYS[today.weekday()]}"


def looks_like_html(text: str) -> bool:
    return "<html" in text or "<div" in text


def markdown_to_html(text: str) -> str:
    """
    简单的 Markdown -> HTML 转换

    只处理标题、粗体、斜体、段落和换行，不是完整的 Markdown 解析器
    """
    html = text.strip()
    html = re.sub(r"^### (.*)$", r"<h3>\1</h3>", html, flags=re.M)
    html = re.sub(r"^## (.*)$", r"<h2>\1</h2>", html, flags=re.M)
    html = re.sub(r"^# (.*)$", r"<h1>\1</h1>", html, flags=re.M)
    html = re.sub(r"\*\*(.+?)\*\*", r"<strong>\1</strong>", html)
    html = re.sub(r"\*(.+?)\*", r"<em>\1</em>", html)
    html = re.sub(r"\n\s*\n", "</p><p>", html)
    html = html.replace("\n", "<br>")
    return f"<p>{html}</p>"


def render_email(narrative: str, today: date) -> str:
    """
    生成完整的邮件 HTML

    相同的 narrative 和日期总是生成完全相同的输出

    Args:
        narrative: LLM 生成的总结 (HTML 或 Markdown)
        today: 邮件头部显示的日期

    Returns:
        完整的 HTML 文档
    """
    content = narrative if looks_like_html(narrative) else markdown_to_html(narrative)
    footer = "\n".join(f"      <p>{line}</p>" for line in EMAIL_FOOTER)

    lines = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        '  <meta charset="UTF-8">',
        '  <meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f"  <style>{EMAIL_STYLE}  </style>",
        "</head>",
        "<body>",
        '  <div class="container">',
        f"    <h1>{EMAIL_TITLE}</h1>",
        f"    <p><strong>{format_date(today)}</strong></p>",
        content,
        '    <div class="footer">',
        footer,
        "    </div>",
        "  </div>",
        "</body>",
        "</html>",
    ]
    return "\n".join(lines) + "\n"
