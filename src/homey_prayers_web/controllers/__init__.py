"""Route controllers."""

from homey_prayers_web.controllers.base import Controller
from homey_prayers_web.controllers.main import MainController

__all__ = ["Controller", "MainController"]
