"""Configuration management."""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Annotated, Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator
from uvicorn.config import LOG_LEVELS

ENV_PREFIX = "PRAYERS_WEB_"
DEFAULT_CONFIG_PATH = Path("config") / "default.json"
LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}

CONFIG_KEYS = (
    "WEBROOT",
    "STATIC_FILES",
    "PORT",
    "HOST",
    "MAIN_FILE_URL",
    "MAIN_FILE_PATH",
    "MAIN_FILE_NAME",
    "BROWSER_PORT",
    "DEBUG",
    "LOG_LEVEL",
    "WEB_MODULES",
    "SHUTDOWN_TIMEOUT",
)


def _get_default_webroot() -> Path:
    """Get default web root directory."""
    return Path(__file__).parent / "web"


def _get_default_web_modules() -> Path:
    """Get default bundled client modules directory."""
    return Path("build") / "web_modules"


class ConfigFileSchema(BaseModel):
    """Schema of the JSON configuration file."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    webroot: str | None = Field(default=None, alias="WEBROOT")
    static_files: str = Field(default="public", alias="STATIC_FILES")
    port: Annotated[int, Field(ge=1, le=65535, alias="PORT")] = 3000
    host: str = Field(default="0.0.0.0", alias="HOST")
    main_file_url: str = Field(default="/", alias="MAIN_FILE_URL")
    main_file_path: str | None = Field(default=None, alias="MAIN_FILE_PATH")
    main_file_name: str = Field(default="index.html", alias="MAIN_FILE_NAME")
    browser_port: Annotated[int, Field(ge=1, le=65535, alias="BROWSER_PORT")] = 7000
    debug: str | bool = Field(default="", alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    web_modules: str | None = Field(default=None, alias="WEB_MODULES")
    shutdown_timeout: Annotated[int | None, Field(ge=0, alias="SHUTDOWN_TIMEOUT")] = None

    @field_validator("main_file_url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError(f"MAIN_FILE_URL must start with '/': {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        level = LOG_LEVEL_ALIASES.get(level, level)
        if level.lower() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @field_validator("debug")
    @classmethod
    def _normalize_debug(cls, value: str | bool) -> str:
        if isinstance(value, bool):
            return "*" if value else ""
        return value.strip()


@dataclass
class AppConfig:
    """Application configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 3000
    browser_port: int = 7000
    log_level: str = "INFO"
    debug: str = ""
    shutdown_timeout: int | None = None

    # Static files
    webroot: Path = field(default_factory=_get_default_webroot)
    static_files: str = "public"
    web_modules: Path = field(default_factory=_get_default_web_modules)

    # Main page
    main_file_url: str = "/"
    main_file_path: Path = field(default_factory=_get_default_webroot)
    main_file_name: str = "index.html"

    config_path: Path | None = None

    @property
    def static_dir(self) -> Path:
        """Directory served under the main file URL."""
        return self.webroot / self.static_files

    @property
    def main_file(self) -> Path:
        """File returned for the main route."""
        return self.main_file_path / self.main_file_name

    @classmethod
    def from_dict(cls, data: dict[str, Any], config_path: Path | None = None) -> Self:
        """Build configuration from raw key/value pairs (upper case keys)."""
        schema = ConfigFileSchema.model_validate(data)
        webroot = Path(schema.webroot) if schema.webroot else _get_default_webroot()
        return cls(
            host=schema.host,
            port=schema.port,
            browser_port=schema.browser_port,
            log_level=schema.log_level,
            debug=schema.debug,
            shutdown_timeout=schema.shutdown_timeout,
            webroot=webroot,
            static_files=schema.static_files,
            web_modules=Path(schema.web_modules)
            if schema.web_modules
            else _get_default_web_modules(),
            main_file_url=schema.main_file_url,
            main_file_path=Path(schema.main_file_path) if schema.main_file_path else webroot,
            main_file_name=schema.main_file_name,
            config_path=config_path,
        )

    @classmethod
    def from_file(cls, path: Path | None = None) -> Self:
        """
        Load configuration from a JSON file, then apply environment overrides.

        Args:
            path: Config file path (default: $PRAYERS_WEB_CONFIG or config/default.json)

        Returns:
            Resolved AppConfig

        Raises:
            ValueError: The file is not valid JSON or a value fails validation
            OSError: The file exists but cannot be read
        """
        if path is None:
            path = Path(os.getenv(f"{ENV_PREFIX}CONFIG", str(DEFAULT_CONFIG_PATH)))

        data: dict[str, Any] = {}
        if path.exists():
            data = json.loads(path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise ValueError(f"Config file must hold a JSON object: {path}")

        for key in CONFIG_KEYS:
            value = os.getenv(f"{ENV_PREFIX}{key}")
            if value is not None:
                data[key] = value

        return cls.from_dict(data, config_path=path)

    def to_dict(self) -> dict[str, Any]:
        """Return as a dictionary with the config file keys."""
        return {
            "WEBROOT": str(self.webroot),
            "STATIC_FILES": self.static_files,
            "PORT": self.port,
            "HOST": self.host,
            "MAIN_FILE_URL": self.main_file_url,
            "MAIN_FILE_PATH": str(self.main_file_path),
            "MAIN_FILE_NAME": self.main_file_name,
            "BROWSER_PORT": self.browser_port,
            "DEBUG": self.debug,
            "LOG_LEVEL": self.log_level,
            "WEB_MODULES": str(self.web_modules),
            "SHUTDOWN_TIMEOUT": self.shutdown_timeout,
        }


_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get application configuration."""
    global _config
    if _config is None:
        _config = AppConfig.from_file()
    return _config


def setup_logging(level: str = "INFO", debug: str = "") -> None:
    """
    Setup application logging.

    Args:
        level: Root log level
        debug: Logger names to switch to DEBUG, comma separated ("*" for all)
    """
    logging.basicConfig(
        level=LOG_LEVELS[level.lower()],
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    for namespace in debug.split(","):
        namespace = namespace.strip()
        if not namespace:
            continue
        if namespace.lower() in ("*", "true", "1"):
            logging.getLogger().setLevel(logging.DEBUG)
            continue
        logging.getLogger(namespace.rstrip("*").rstrip(":.")).setLevel(logging.DEBUG)
