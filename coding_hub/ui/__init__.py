"""
UI adapters for the hub.

Currently provides a Dash-based web UI via create_dash_app().
"""

from .dash_app import create_dash_app

__all__ = ["create_dash_app"]
