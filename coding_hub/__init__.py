"""
Top-level package for the Coding Resource Hub.

This package exposes the core architecture (catalogs, filtering, UI adapters).
Most code should import from submodules such as:
    coding_hub.core
    coding_hub.config
    coding_hub.ui
"""

__all__: list[str] = []
