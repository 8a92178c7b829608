"""Shared fixtures."""

from pathlib import Path

import pytest

from homey_prayers_web.config import AppConfig

INDEX_HTML = "<!DOCTYPE html><html><body><h1>Homey Prayers</h1></body></html>"
MAIN_CSS = "body { margin: 0; }"
VENDOR_JS = "export default {};"


@pytest.fixture
def web_root(tmp_path: Path) -> Path:
    """Create a web root with a main file and a static subtree."""
    root = tmp_path / "settings"
    (root / "public" / "css").mkdir(parents=True)
    (root / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    (root / "public" / "css" / "main.css").write_text(MAIN_CSS, encoding="utf-8")
    return root


@pytest.fixture
def web_modules(tmp_path: Path) -> Path:
    """Create a bundled client modules directory."""
    modules = tmp_path / "build" / "web_modules"
    (modules / "common").mkdir(parents=True)
    (modules / "common" / "vendor.js").write_text(VENDOR_JS, encoding="utf-8")
    return modules


@pytest.fixture
def app_config(web_root: Path, web_modules: Path) -> AppConfig:
    """Configuration pointing at the temporary web root."""
    return AppConfig(
        host="127.0.0.1",
        port=3000,
        webroot=web_root,
        static_files="public",
        web_modules=web_modules,
        main_file_url="/",
        main_file_path=web_root,
        main_file_name="index.html",
    )
