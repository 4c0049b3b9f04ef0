"""
Dash callback registration. Each module exposes a register_*_callbacks(app, ctx) function.
"""

from .callbacks_filters import register_filter_callbacks
from .callbacks_navigation import register_navigation_callbacks

__all__ = ["register_filter_callbacks", "register_navigation_callbacks"]
