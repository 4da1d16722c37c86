# Trending service package: fetch, parse, extract and render GitHub Trending

from .models import TrendingItem
from .errors import WidgetError, FetchError, ParseError
from .page_fetcher import PageFetcher
from .page_parser import parse_document, select_nodes, select_text, select_attr
from .item_extractor import ItemExtractor
from .fragment_renderer import FragmentRenderer
from .logging_config import (
    setup_logging,
    stop_logging,
)

__all__ = [
    "TrendingItem",
    "WidgetError",
    "FetchError",
    "ParseError",
    "PageFetcher",
    "parse_document",
    "select_nodes",
    "select_text",
    "select_attr",
    "ItemExtractor",
    "FragmentRenderer",
    "setup_logging",
    "stop_logging",
]
