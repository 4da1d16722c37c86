"""
Widget module serving GitHub Trending as an embeddable HTML fragment.
"""

from .services import TrendingWidgetService
from .routes import create_widget_routes
from .factory import create_widget_module

__all__ = ['TrendingWidgetService', 'create_widget_routes', 'create_widget_module']
