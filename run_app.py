#!/usr/bin/env python3
"""
Runner script for the GitHub Trending widget server.
This script ensures the correct Python path is set and runs the app.
"""

import logging
import sys
from pathlib import Path

# Add the current directory to Python path
current_dir = Path(__file__).parent
sys.path.insert(0, str(current_dir))

from app.main import create_app, parse_args
from config_manager import ConfigManager
from trending_service.logging_config import setup_logging, stop_logging

logger = logging.getLogger("run_app")


def main(argv=None) -> int:
    args = parse_args(argv)

    config_manager = ConfigManager(args.config)
    app_config = config_manager.get_app_config()
    source_config = config_manager.get_source_config()

    # Override configuration with command line arguments
    if args.port:
        app_config.port = args.port
    if args.host:
        app_config.host = args.host
    if args.debug:
        app_config.debug = args.debug

    setup_logging(debug=app_config.debug)
    app = create_app(config_manager)

    logger.info(f"GitHub Trending widget server starting on {app_config.host}:{app_config.port}")
    logger.info(f"Source page: {source_config.url} (timeout {source_config.timeout}s)")

    try:
        app.run(
            host=app_config.host,
            port=app_config.port,
            debug=app_config.debug,
            threaded=True,
        )
    except SystemExit as e:
        # Werkzeug reports a failed bind itself and exits with status 1
        if e.code:
            logger.critical(f"Could not listen on {app_config.host}:{app_config.port}, exiting")
        raise
    finally:
        stop_logging()
    return 0


if __name__ == "__main__":
    sys.exit(main())
