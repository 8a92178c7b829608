"""Homey Prayers Web - prayer times settings front end server."""

__version__ = "0.0.1"
