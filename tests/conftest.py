"""Shared fixtures: trending page markup and settings."""

from typing import Optional

import pytest

from trending_daily.config import Settings


def make_block(
    owner: str,
    name: str,
    description: Optional[str] = "A sample project",
    language: Optional[str] = "Python",
    stars: Optional[str] = "1,234",
    forks: Optional[str] = "56",
    gained: Optional[str] = "78 stars today",
) -> str:
    """Build one <article> block shaped like the live trending page."""
    parts = [
        '<article class="Box-row">',
        '  <div class="float-right">',
        f'    <a href="/login?return_to=%2F{owner}%2F{name}" class="btn-sm btn">Star</a>',
        "  </div>",
        '  <h2 class="h3 lh-condensed">',
        f'    <a href="/{owner}/{name}" data-view-component="true" class="Link">',
        f'      <span class="text-normal">{owner} /</span> {name}',
        "    </a>",
        "  </h2>",
    ]
    if description is not None:
        parts.append(f'  <p class="col-9 color-fg-muted my-1 pr-4">\n    {description}\n  </p>')
    parts.append('  <div class="f6 color-fg-muted mt-2">')
    if language is not None:
        parts.append(
            '    <span class="d-inline-block ml-0 mr-3">'
            f'<span itemprop="programmingLanguage">{language}</span></span>'
        )
    if stars is not None:
        parts.append(
            f'    <a href="/{owner}/{name}/stargazers" class="Link--muted d-inline-block mr-3">'
            f'<svg class="octicon octicon-star"></svg>\n        {stars}\n    </a>'
        )
    if forks is not None:
        parts.append(
            f'    <a href="/{owner}/{name}/forks" class="Link--muted d-inline-block mr-3">'
            f'<svg class="octicon octicon-repo-forked"></svg>\n        {forks}\n    </a>'
        )
    parts.append(
        '    <span class="d-inline-block mr-3">Built by '
        f'<a href="/{owner}" class="d-inline-block"><img class="avatar mb-1"></a></span>'
    )
    if gained is not None:
        parts.append(
            '    <span class="d-inline-block float-sm-right">'
            f'<svg class="octicon octicon-star"></svg>\n        {gained}\n    </span>'
        )
    parts.extend(["  </div>", "</article>"])
    return "\n".join(parts)


def make_page(*blocks: str) -> str:
    return "\n".join([
        "<!DOCTYPE html><html><body>",
        '<div class="Box">',
        '<div class="Box-header">Trending repositories</div>',
        *blocks,
        "</div>",
        "</body></html>",
    ])


@pytest.fixture
def trending_page() -> str:
    return make_page(
        make_block("octocat", "hello-world", stars="12.5k", forks="1,024", gained="1.2k stars today"),
        make_block("torvalds", "linux", description=None, language=None, gained=None),
        make_block("psf", "requests", stars="10k", forks="9,876", gained="321 stars today"),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        RECIPIENT_EMAIL="dev@example.com",
        FROM_EMAIL="digest@example.com",
        RESEND_API_KEY="re_test",
        LLM_API_KEY="sk-test",
        LLM_BASE_URL="https://llm.example.com/v1",
        LLM_MODEL="test-model",
    )
