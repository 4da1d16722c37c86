import argparse
import logging
from typing import Optional

from config_manager import ConfigManager

from flask import Flask, jsonify

from app.widget.factory import create_widget_module

logger = logging.getLogger(__name__)

SERVICE_NAME = "github-trending-widget"


def create_app(config_manager: Optional[ConfigManager] = None, fetcher=None) -> Flask:
    """Build the Flask application and its route table.

    Args:
        config_manager: Configuration source; a fresh ConfigManager when omitted
        fetcher: Optional replacement for the outbound page fetcher

    Returns:
        Configured Flask application
    """
    config_manager = config_manager or ConfigManager()
    source_config = config_manager.get_source_config()
    widget_config = config_manager.get_widget_config()

    app = Flask(__name__, static_folder=None)

    # -------------------------------------------------------------------------
    # Subsystems
    # -------------------------------------------------------------------------

    widget_module = create_widget_module(
        source_config=source_config,
        widget_config=widget_config,
        fetcher=fetcher,
    )
    app.extensions["widget_module"] = widget_module

    # -------------------------------------------------------------------------
    # Operational endpoints
    # -------------------------------------------------------------------------

    @app.get("/actuator/health")
    def actuator_health():
        """Health check endpoint for container orchestration and monitoring."""
        return jsonify({
            "status": "UP",
            "service": SERVICE_NAME
        }), 200

    app.register_blueprint(widget_module["blueprint"])

    logger.debug(f"Widget configured for source {source_config.url}")
    return app


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line overrides for the server address."""
    parser = argparse.ArgumentParser(description="GitHub Trending widget server")
    parser.add_argument("--port", type=int, help="Port to run the server on")
    parser.add_argument("--host", type=str, help="Host to bind the server to")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    parser.add_argument("--config", type=str, default="widget_config.json", help="Path to JSON config file")
    return parser.parse_args(argv)
