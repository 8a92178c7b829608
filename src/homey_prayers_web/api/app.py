"""FastAPI application composition."""

import logging
from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from homey_prayers_web import __version__
from homey_prayers_web.api.errors import register_error_handlers
from homey_prayers_web.api.schemas import HealthResponse
from homey_prayers_web.api.static import StaticDirectories
from homey_prayers_web.config import AppConfig
from homey_prayers_web.controllers import Controller, MainController

logger = logging.getLogger(__name__)


class PrayersApp:
    """
    Wires the web application together.

    Order: database, middlewares and static files, controllers, error handling.
    """

    def __init__(self, controllers: Sequence[Controller], config: AppConfig) -> None:
        """
        Create application.

        Args:
            controllers: Controllers whose routers are mounted at "/"
            config: Application configuration
        """
        self._config = config
        self.app = FastAPI(
            title="Homey Prayers Web",
            description="Prayer times settings front end",
            version=__version__,
            lifespan=self._lifespan,
        )
        self.app.state.config = config

        self._static_mounts = self._initialize_middlewares()
        self._initialize_controllers(controllers)
        self._mount_static_files()
        self._initialize_error_middleware()

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler."""
        # Startup
        await self._initialize_database()
        logger.info(f"App listening on the port {self._config.port}")

        yield

        # Shutdown
        logger.info("App shutting down...")

    async def _initialize_database(self) -> None:
        """No database is used yet."""
        logger.debug("Database initialization skipped.")

    def _initialize_middlewares(self) -> dict[str, list[Path]]:
        """Add middlewares and collect static directories per mount path."""
        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        mounts: dict[str, list[Path]] = {}
        for url, directory in (
            (self._config.main_file_url, self._config.static_dir),
            ("/", self._config.web_modules),
        ):
            if not directory.is_dir():
                logger.warning(f"Static directory not found, skipped: {directory}")
                continue
            mounts.setdefault(url.rstrip("/") or "/", []).append(directory)
            logger.debug(f"Static directory {directory} -> {url}")
        return mounts

    def _initialize_controllers(self, controllers: Sequence[Controller]) -> None:
        for controller in controllers:
            self.app.include_router(controller.router)
            logger.debug(
                f"Controller registered: {controller.__class__.__name__} ({controller.path})"
            )

        @self.app.get("/health", response_model=HealthResponse)
        async def health_check() -> HealthResponse:
            """Health check endpoint."""
            return HealthResponse(status="healthy", version=__version__)

    def _mount_static_files(self) -> None:
        # Starlette routes are first match: mounts go after controllers, deepest first
        for url in sorted(self._static_mounts, key=len, reverse=True):
            name = "static" if url == "/" else f"static{url.replace('/', '_')}"
            self.app.mount(url, StaticDirectories(self._static_mounts[url]), name=name)

    def _initialize_error_middleware(self) -> None:
        register_error_handlers(self.app)

    def listen(self) -> uvicorn.Server:
        """Create the HTTP server for this application (call ``run()`` to serve)."""
        server_config = uvicorn.Config(
            self.app,
            host=self._config.host,
            port=self._config.port,
            log_level=self._config.log_level.lower(),
            timeout_graceful_shutdown=self._config.shutdown_timeout,
        )
        return uvicorn.Server(server_config)


def create_app(
    config: AppConfig | None = None,
    controllers: Sequence[Controller] | None = None,
) -> FastAPI:
    """
    Create FastAPI application.

    Args:
        config: Application configuration (default: AppConfig())
        controllers: Route controllers (default: MainController)

    Returns:
        Configured FastAPI app
    """
    if config is None:
        config = AppConfig()
    if controllers is None:
        controllers = [MainController(config)]
    return PrayersApp(controllers, config).app
