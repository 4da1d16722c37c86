"""
Widget routes serving the trending fragment to the dashboard host.
"""
from flask import Blueprint, Response, request
from .services import TrendingWidgetService

WIDGET_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


def create_widget_routes(widget_service: TrendingWidgetService) -> Blueprint:
    """Create widget routes blueprint."""
    bp = Blueprint('widget', __name__)

    @bp.route('/', defaults={'path': ''}, methods=WIDGET_METHODS)
    @bp.route('/<path:path>', methods=WIDGET_METHODS)
    def trending_widget(path: str):
        """Render GitHub Trending as an HTML fragment, whatever the path or method."""
        result = widget_service.handle(request)

        response = Response(result.body, status=result.status_code, content_type=result.content_type)
        for name, value in result.headers.items():
            response.headers[name] = value
        return response

    return bp
