"""Main entry point for Homey Prayers Web."""

import logging
import sys

from homey_prayers_web.api.app import PrayersApp
from homey_prayers_web.config import AppConfig, get_config, setup_logging
from homey_prayers_web.controllers import MainController

logger = logging.getLogger(__name__)


def serve(config: AppConfig) -> int:
    """
    Build the application and serve it until interrupted.

    Startup errors are logged and swallowed, but unlike a plain return the
    process reports them with exit code 1 so a supervisor can restart it.

    Returns:
        Process exit code (0 after SIGINT, 1 if startup failed)
    """
    try:
        app = PrayersApp([MainController(config)], config)
        server = app.listen()
    except Exception as e:
        logger.error(f"Startup failed: {e}", exc_info=True)
        return 1

    logger.info(f"Static files: {config.static_dir}")
    logger.info(f"Main file: {config.main_file} -> {config.main_file_url}")
    logger.debug(f"Browser sync port: {config.browser_port}")

    # uvicorn drains open connections on SIGINT, then re-raises the signal
    try:
        server.run()
    except KeyboardInterrupt:
        pass

    logger.info("Process terminated")
    return 0


def main() -> int:
    """Run the Homey Prayers Web application."""
    try:
        config = get_config()
    except (OSError, ValueError) as e:
        setup_logging()
        logger.error(f"Configuration could not be loaded: {e}")
        return 1

    setup_logging(config.log_level, config.debug)
    logger.info("Homey Prayers Web starting...")
    logger.info(f"Config file: {config.config_path}")

    return serve(config)


if __name__ == "__main__":
    sys.exit(main())
