"""
Core domain layer: catalog entries and store, the filter engine,
per-page selection state and the current-page slot
"""

from .catalog import CatalogStore, Domain, default_catalog
from .entries import (
    DIFFICULTY_LEVELS,
    CommunityEntry,
    Difficulty,
    LanguageEntry,
    ToolEntry,
    TutorialEntry,
)
from .filtering import derive_categories, filter_languages, filter_tools, filter_tutorials
from .pages import NAV_ITEMS, NavItem, Page, PageSlot
from .selection_state import (
    LanguageSelection,
    ToolSelection,
    TutorialSelection,
    default_selection,
)

__all__ = [
    "CatalogStore",
    "Domain",
    "default_catalog",
    "DIFFICULTY_LEVELS",
    "CommunityEntry",
    "Difficulty",
    "LanguageEntry",
    "ToolEntry",
    "TutorialEntry",
    "derive_categories",
    "filter_languages",
    "filter_tools",
    "filter_tutorials",
    "NAV_ITEMS",
    "NavItem",
    "Page",
    "PageSlot",
    "LanguageSelection",
    "ToolSelection",
    "TutorialSelection",
    "default_selection",
]
