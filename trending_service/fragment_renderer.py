"""
Fragment Renderer Module

Renders trending items into the HTML fragment consumed by the dashboard
host. Markup and class names follow the host's widget styles; all scraped
text is escaped by the template engine.
"""

from typing import Iterable

from jinja2 import Environment
from markupsafe import Markup

from .models import TrendingItem

STYLE_BLOCK = Markup("""
<style>
  .gh-trending-list .list-item {
    border-bottom: 2px solid var(--color-border);
    padding: 10px;
    margin-bottom: 10px;
    background-color: rgba(255, 255, 255, 0.05);
  }
  .gh-trending-list .list-item:last-child {
    margin-bottom: 0;
    border-bottom: none;
    padding: 10px;
  }
  .gh-trending-list .repo-language-color {
    display: inline-block;
    width: 10px;
    height: 10px;
    border-radius: 50%;
    margin-right: 4px;
    vertical-align: middle;
    background-color: var(--color-text-secondary);
  }
</style>
""")

FORK_ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 16 16" width="1em" height="1em" fill="currentColor">'
    '<path d="M5 5.372v.878c0 .414.336.75.75.75h4.5a.75.75 0 0 0 .75-.75v-.878a2.25 2.25 0 1 1 1.5 0v.878'
    'a2.25 2.25 0 0 1-2.25 2.25h-1.5v2.128a2.251 2.251 0 1 1-1.5 0V8.5h-1.5A2.25 2.25 0 0 1 3.5 6.25v-.878'
    'a2.25 2.25 0 1 1 1.5 0ZM5 3.25a.75.75 0 1 0-1.5 0 .75.75 0 0 0 1.5 0Zm6.5.75a.75.75 0 1 0 0-1.5.75.75'
    ' 0 0 0 0 1.5Zm-5 8.25a.75.75 0 1 0-1.5 0 .75.75 0 0 0 1.5 0Z"></path></svg>'
)

FRAGMENT_TEMPLATE = (
    '{% if include_styles %}{{ styles }}{% endif %}'
    '<ul class="list gh-trending-list">'
    '{% for item in items %}'
    '<li class="list-item">'
    '<a class="size-h4 color-highlight block text-truncate" href="{{ item.absolute_url(base_url) }}" target="_blank">{{ item.name }}</a>'
    '{% if item.description %}<p class="color-paragraph size-h5 margin-top-5">{{ item.description }}</p>{% endif %}'
    '<ul class="list-horizontal-text size-h6 margin-top-10">'
    '{% if item.language %}<li><span class="repo-language-color"></span> {{ item.language }}</li>{% endif %}'
    '{% if item.total_stars %}<li>⭐ {{ item.total_stars }}</li>{% endif %}'
    '{% if item.forks %}<li>' + FORK_ICON + ' {{ item.forks }}</li>{% endif %}'
    '{% if item.stars_today %}<li>⭐ {{ item.stars_today }}</li>{% endif %}'
    '</ul>'
    '</li>'
    '{% endfor %}'
    '</ul>'
)

_environment = Environment(autoescape=True)
_fragment_template = _environment.from_string(FRAGMENT_TEMPLATE)


class FragmentRenderer:
    """Render trending items as an embeddable HTML fragment."""

    def __init__(self, base_url: str = "https://github.com", include_styles: bool = True):
        self.base_url = base_url.rstrip("/")
        self.include_styles = include_styles

    def render(self, items: Iterable[TrendingItem]) -> str:
        """Render items, in the given order, into the widget fragment."""
        return _fragment_template.render(
            items=list(items),
            base_url=self.base_url,
            include_styles=self.include_styles,
            styles=STYLE_BLOCK,
        )
