"""
Layout builders for the Dash UI: navbar, footer and one builder per page.
"""

from .build_layout import build_layout, build_page

__all__ = ["build_layout", "build_page"]
