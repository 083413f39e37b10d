"""Tests for the email HTML renderer."""

from datetime import date

import pytest

from trending_daily.renderer import (
    format_date,
    looks_like_html,
    markdown_to_html,
    render_email,
)

TODAY = date(2026, 10, 18)


def test_format_date():
    assert format_date(TODAY) == "2026年10月18日 星期日"
    assert format_date(date(2026, 1, 5)) == "2026年1月5日 星期一"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("<div>hi</div>", True),
        ("<html><body>hi</body></html>", True),
        ("# Title\n\nplain", False),
        ("<p>only paragraphs</p>", False),
    ],
)
def test_looks_like_html(text, expected):
    assert looks_like_html(text) is expected


def test_markdown_headings():
    html = markdown_to_html("# One\n## Two\n### Three")

    assert "<h1>One</h1>" in html
    assert "<h2>Two</h2>" in html
    assert "<h3>Three</h3>" in html
    assert "#" not in html


def test_markdown_emphasis():
    html = markdown_to_html("**bold** and *italic*")

    assert html == "<p><strong>bold</strong> and <em>italic</em></p>"


def test_markdown_paragraphs_and_line_breaks():
    html = markdown_to_html("first\nline\n\nsecond")

    assert html == "<p>first<br>line</p><p>second</p>"


def test_render_email_wraps_html_narrative_unchanged():
    narrative = '<div class="repo-card">octocat/hello-world</div>'
    html = render_email(narrative, TODAY)

    assert html.startswith("<!DOCTYPE html>")
    assert narrative in html
    assert "<h1>GitHub Trending 每日总结</h1>" in html
    assert "2026年10月18日 星期日" in html
    assert '<div class="footer">' in html
    assert "本邮件由 GitHub Trending Daily 自动生成" in html
    assert html.rstrip().endswith("</html>")


def test_render_email_converts_plain_text():
    html = render_email("## Highlights\n\n**octocat/hello-world** is great", TODAY)

    assert "<h2>Highlights</h2>" in html
    assert "<strong>octocat/hello-world</strong>" in html


def test_render_email_is_deterministic():
    narrative = "# Daily\n\nSome *text*"

    assert render_email(narrative, TODAY) == render_email(narrative, TODAY)


def test_render_email_depends_on_date():
    narrative = "<div>x</div>"

    assert render_email(narrative, TODAY) != render_email(narrative, date(2026, 10, 19))
