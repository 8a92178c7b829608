"""Main page controller."""

import logging
from pathlib import Path

from fastapi.responses import FileResponse

from homey_prayers_web.config import AppConfig
from homey_prayers_web.controllers.base import Controller
from homey_prayers_web.exceptions import NotFoundException

logger = logging.getLogger(__name__)


class MainController(Controller):
    """Serves the single page front end at the configured URL."""

    def __init__(self, config: AppConfig) -> None:
        """
        Initialize controller.

        Args:
            config: Application configuration (MAIN_FILE_URL, MAIN_FILE_PATH, MAIN_FILE_NAME)
        """
        self.path = config.main_file_url
        self._file_path = config.main_file
        super().__init__()

    @property
    def file_path(self) -> Path:
        """Served file path."""
        return self._file_path

    def initialize_routes(self) -> None:
        self.router.add_api_route(
            self.path,
            self.main_page_route,
            methods=["GET", "HEAD"],
            response_class=FileResponse,
            include_in_schema=False,
        )
        # Non-strict routing: "/settings/" serves the same file as "/settings"
        if self.path != "/":
            self.router.add_api_route(
                self.path.rstrip("/") + "/",
                self.main_page_route,
                methods=["GET", "HEAD"],
                response_class=FileResponse,
                include_in_schema=False,
            )

    async def main_page_route(self) -> FileResponse:
        """Serve the main HTML file."""
        if not self._file_path.is_file():
            logger.warning(f"Main file missing: {self._file_path}")
            raise NotFoundException(self._file_path.name)
        return FileResponse(self._file_path)
