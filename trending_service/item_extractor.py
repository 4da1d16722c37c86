"""
Item Extractor Module

Turns repository cards on the trending page into TrendingItem models.
"""

import logging
from typing import List, Optional

from bs4 import Tag
from pydantic import ValidationError

from .models import TrendingItem
from .page_parser import select_attr, select_nodes, select_text

logger = logging.getLogger(__name__)

CARD_SELECTOR = "article.Box-row"
NAME_LINK_SELECTOR = "h2 a"
DESCRIPTION_SELECTOR = "p.col-9"
STARS_TODAY_SELECTOR = "span.d-inline-block.float-sm-right"
LANGUAGE_SELECTOR = "span[itemprop='programmingLanguage']"
TOTAL_STARS_SELECTOR = "a[href$='/stargazers']"
FORKS_SELECTOR = "a[href$='/forks']"


class ItemExtractor:
    """Extract trending repository items from a parsed page."""

    def extract_items(self, document: Tag) -> List[TrendingItem]:
        """Extract all complete items from the document, in document order.

        Cards without a name or link are skipped.
        """
        items = []
        for index, card in enumerate(select_nodes(document, CARD_SELECTOR)):
            item = self.extract_item(card)
            if item is None:
                logger.debug(f"Skipping repository card #{index}: missing name or link")
                continue
            items.append(item)

        logger.debug(f"Extracted {len(items)} trending repositories")
        return items

    def extract_item(self, card: Tag) -> Optional[TrendingItem]:
        """Extract a single card, returning None when required fields are missing."""
        try:
            return TrendingItem(
                name=select_text(card, NAME_LINK_SELECTOR),
                url=select_attr(card, NAME_LINK_SELECTOR, "href"),
                description=select_text(card, DESCRIPTION_SELECTOR),
                language=select_text(card, LANGUAGE_SELECTOR),
                total_stars=select_text(card, TOTAL_STARS_SELECTOR),
                stars_today=select_text(card, STARS_TODAY_SELECTOR),
                forks=select_text(card, FORKS_SELECTOR),
            )
        except ValidationError:
            return None
