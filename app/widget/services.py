"""
Widget subsystem services: fetch, parse, extract and render GitHub Trending.
"""
import logging
from typing import Dict, Optional, Any

from trending_service.errors import WidgetError
from trending_service.fragment_renderer import FragmentRenderer
from trending_service.item_extractor import ItemExtractor
from trending_service.page_fetcher import PageFetcher
from trending_service.page_parser import parse_document
from .models import WidgetResponse, TEXT_CONTENT_TYPE

logger = logging.getLogger(__name__)

WIDGET_CONTENT_TYPE_HEADER = "Widget-Content-Type"

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",  # HTTP 1.1
    "Pragma": "no-cache",  # HTTP 1.0
    "Expires": "0",  # proxies
}


class TrendingWidgetService:
    """Service building the trending widget for a single request.

    Every call re-fetches and re-parses the source page; nothing is shared
    between requests except immutable collaborators.
    """

    def __init__(
        self,
        fetcher: PageFetcher,
        extractor: ItemExtractor,
        renderer: FragmentRenderer,
        disable_caching: bool = True,
    ):
        self.fetcher = fetcher
        self.extractor = extractor
        self.renderer = renderer
        self.disable_caching = disable_caching

    def build_headers(self) -> Dict[str, str]:
        """Headers sent with every widget response."""
        headers = {WIDGET_CONTENT_TYPE_HEADER: "html"}
        if self.disable_caching:
            headers.update(NO_CACHE_HEADERS)
        return headers

    def handle(self, request: Optional[Any] = None) -> WidgetResponse:
        """Handle one widget request.

        The request itself is ignored: method, path and body never change
        what is fetched or rendered.
        """
        headers = self.build_headers()

        try:
            html = self.fetcher.fetch()
            document = parse_document(html)
        except WidgetError as e:
            logger.error(f"Error building trending widget ({type(e).__name__}): {e.detail}")
            return self._error_response(e, headers)

        items = self.extractor.extract_items(document)
        body = self.renderer.render(items)
        logger.info(f"Rendered trending widget with {len(items)} repositories")

        return WidgetResponse(status_code=200, body=body, headers=headers)

    def _error_response(self, error: WidgetError, headers: Dict[str, str]) -> WidgetResponse:
        headers = dict(headers)
        headers["X-Content-Type-Options"] = "nosniff"
        return WidgetResponse(
            status_code=500,
            body=error.public_message + "\n",
            headers=headers,
            content_type=TEXT_CONTENT_TYPE,
        )
