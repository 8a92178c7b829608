"""Tests for process bootstrap."""

import json
import logging
import os
import signal
import socket
import subprocess
import sys
import time
from pathlib import Path
from unittest.mock import MagicMock, patch

import httpx
import pytest

import homey_prayers_web.config as config_module
from homey_prayers_web.api.app import PrayersApp
from homey_prayers_web.config import AppConfig
from homey_prayers_web.main import main, serve

SRC_DIR = Path(__file__).resolve().parents[1] / "src"


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


class TestServe:
    """serve() tests with a mocked server."""

    def test_interrupt_exits_cleanly(self, app_config: AppConfig, caplog) -> None:
        """Test SIGINT (KeyboardInterrupt) leads to exit code 0."""
        server = MagicMock()
        server.run.side_effect = KeyboardInterrupt

        with patch.object(PrayersApp, "listen", return_value=server), caplog.at_level(
            logging.INFO
        ):
            assert serve(app_config) == 0

        server.run.assert_called_once()
        assert "Process terminated" in caplog.text

    def test_normal_shutdown(self, app_config: AppConfig) -> None:
        """Test server returning normally also exits with 0."""
        server = MagicMock()
        with patch.object(PrayersApp, "listen", return_value=server):
            assert serve(app_config) == 0

    def test_startup_error_is_logged(self, app_config: AppConfig, caplog) -> None:
        """Test startup errors are logged and swallowed."""
        with patch(
            "homey_prayers_web.main.MainController", side_effect=RuntimeError("boom")
        ), caplog.at_level(logging.ERROR):
            assert serve(app_config) == 1

        assert "Startup failed: boom" in caplog.text


class TestMain:
    """main() tests."""

    def test_invalid_config_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog
    ) -> None:
        """Test an unreadable configuration is reported."""
        config_file = tmp_path / "default.json"
        config_file.write_text('{"PORT": "abc"}', encoding="utf-8")
        monkeypatch.setenv("PRAYERS_WEB_CONFIG", str(config_file))
        monkeypatch.setattr(config_module, "_config", None)

        with caplog.at_level(logging.ERROR):
            assert main() == 1

        assert "Configuration could not be loaded" in caplog.text

    def test_main_serves_loaded_config(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test main passes the file configuration to serve()."""
        config_file = tmp_path / "default.json"
        config_file.write_text('{"PORT": 3210}', encoding="utf-8")
        monkeypatch.setenv("PRAYERS_WEB_CONFIG", str(config_file))
        monkeypatch.setattr(config_module, "_config", None)

        with patch("homey_prayers_web.main.serve", return_value=0) as mock_serve:
            assert main() == 0

        assert mock_serve.call_args.args[0].port == 3210


@pytest.mark.skipif(sys.platform == "win32", reason="SIGINT delivery differs on Windows")
class TestSignalHandling:
    """End-to-end shutdown test in a child process."""

    def test_sigint_stops_server(self, web_root: Path, web_modules: Path, tmp_path: Path) -> None:
        """Test SIGINT closes the listener and exits with code 0."""
        port = _free_port()
        config_file = tmp_path / "default.json"
        config_file.write_text(
            json.dumps(
                {
                    "WEBROOT": str(web_root),
                    "MAIN_FILE_PATH": str(web_root),
                    "WEB_MODULES": str(web_modules),
                    "HOST": "127.0.0.1",
                    "PORT": port,
                    "SHUTDOWN_TIMEOUT": 5,
                }
            ),
            encoding="utf-8",
        )

        env = dict(os.environ)
        env["PRAYERS_WEB_CONFIG"] = str(config_file)
        env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))
        log_file = tmp_path / "server.log"

        with log_file.open("w") as log:
            process = subprocess.Popen(
                [sys.executable, "-m", "homey_prayers_web.main"],
                cwd=tmp_path,
                env=env,
                stdout=log,
                stderr=subprocess.STDOUT,
            )
            try:
                url = f"http://127.0.0.1:{port}/"
                deadline = time.monotonic() + 20
                response = None
                while time.monotonic() < deadline:
                    try:
                        response = httpx.get(url, timeout=1)
                        break
                    except httpx.TransportError:
                        time.sleep(0.2)

                assert response is not None, log_file.read_text()
                assert response.status_code == 200

                process.send_signal(signal.SIGINT)
                assert process.wait(timeout=20) == 0, log_file.read_text()
            finally:
                if process.poll() is None:
                    process.kill()
                    process.wait()

        assert "Process terminated" in log_file.read_text()
        with pytest.raises(httpx.TransportError):
            httpx.get(url, timeout=1)
