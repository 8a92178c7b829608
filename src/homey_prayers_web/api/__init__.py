"""Web API layer."""

from homey_prayers_web.api.app import PrayersApp, create_app

__all__ = ["PrayersApp", "create_app"]
