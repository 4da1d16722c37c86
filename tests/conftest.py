"""
Shared fixtures for the trending widget tests.
"""
import logging

import pytest

from trending_service.errors import WidgetError
from trending_service.logging_config import NOISY_LOGGERS

WIDGET_ENV_VARS = [
    "APP_HOST",
    "APP_PORT",
    "APP_DEBUG",
    "TRENDING_SOURCE_URL",
    "TRENDING_BASE_URL",
    "TRENDING_TIMEOUT",
    "TRENDING_USER_AGENT",
    "WIDGET_INCLUDE_STYLES",
    "WIDGET_DISABLE_CACHING",
]


class StubFetcher:
    """Fetcher returning canned HTML or raising a canned error."""

    def __init__(self, html: str = "", error: WidgetError = None):
        self.html = html
        self.error = error
        self.calls = 0

    def fetch(self) -> str:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.html


def _build_card(
    name="octo/repo",
    href="/octo/repo",
    description="A repo",
    language="Go",
    total_stars="1,234",
    forks="56",
    stars_today="12 stars today",
) -> str:
    parts = ['<article class="Box-row">']
    parts.append('<div class="float-right"><a href="/login?return_to=%2Focto%2Frepo" class="btn-sm btn">Star</a></div>')
    if name is not None:
        href_attr = f' href="{href}"' if href is not None else ""
        parts.append(f'<h2 class="h3 lh-condensed"><a{href_attr} class="Link">\n  {name}\n</a></h2>')
    if description is not None:
        parts.append(f'<p class="col-9 color-fg-muted my-1 pr-4">\n    {description}\n  </p>')
    parts.append('<div class="f6 color-fg-muted mt-2">')
    if language is not None:
        parts.append(
            '<span class="d-inline-block ml-0 mr-3">'
            '<span class="repo-language-color" style="background-color: #00ADD8"></span>'
            f'<span itemprop="programmingLanguage">{language}</span>'
            '</span>'
        )
    if total_stars is not None:
        parts.append(
            f'<a href="{href or "/x/y"}/stargazers" class="Link Link--muted d-inline-block mr-3">'
            f'<svg class="octicon octicon-star"></svg>\n        {total_stars}</a>'
        )
    if forks is not None:
        parts.append(
            f'<a href="{href or "/x/y"}/forks" class="Link Link--muted d-inline-block mr-3">'
            f'<svg class="octicon octicon-repo-forked"></svg>\n        {forks}</a>'
        )
    if stars_today is not None:
        parts.append(
            '<span class="d-inline-block float-sm-right">'
            f'<svg class="octicon octicon-star"></svg>\n        {stars_today}</span>'
        )
    parts.append('</div>')
    parts.append('</article>')
    return "\n".join(parts)


def _build_page(*cards: str) -> str:
    return (
        "<!DOCTYPE html><html><head><title>Trending repositories on GitHub today</title></head>"
        '<body><div class="Box">' + "\n".join(cards) + "</div></body></html>"
    )


@pytest.fixture
def make_card():
    """Factory building one repository card; pass None to omit a field."""
    return _build_card


@pytest.fixture
def make_page():
    """Factory wrapping repository cards in a trending page."""
    return _build_page


@pytest.fixture
def stub_fetcher_cls():
    return StubFetcher


@pytest.fixture
def clean_env(monkeypatch):
    """Remove widget environment overrides so defaults apply."""
    for name in WIDGET_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and levels touched by setup_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    noisy_levels = {name: logging.getLogger(name).level for name in NOISY_LOGGERS}
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, noisy_level in noisy_levels.items():
        logging.getLogger(name).setLevel(noisy_level)
