"""
Factory for creating the widget module.
"""
from config_manager import SourceConfig, WidgetConfig
from trending_service.fragment_renderer import FragmentRenderer
from trending_service.item_extractor import ItemExtractor
from trending_service.page_fetcher import PageFetcher
from .services import TrendingWidgetService
from .routes import create_widget_routes


def create_widget_module(source_config: SourceConfig, widget_config: WidgetConfig, fetcher=None) -> dict:
    """
    Create the widget module with all its components.

    Args:
        source_config: Source page settings (URL, base URL, timeout, user agent)
        widget_config: Response settings (styles, cache suppression)
        fetcher: Optional fetcher replacing the HTTP fetcher, e.g. in tests

    Returns:
        Dictionary containing:
            - service: TrendingWidgetService instance
            - blueprint: Flask blueprint for routes
    """
    fetcher = fetcher or PageFetcher(
        url=source_config.url,
        timeout=source_config.timeout,
        user_agent=source_config.user_agent,
    )
    renderer = FragmentRenderer(
        base_url=source_config.base_url,
        include_styles=widget_config.include_styles,
    )
    service = TrendingWidgetService(
        fetcher=fetcher,
        extractor=ItemExtractor(),
        renderer=renderer,
        disable_caching=widget_config.disable_caching,
    )
    blueprint = create_widget_routes(service)

    return {
        "service": service,
        "blueprint": blueprint
    }
