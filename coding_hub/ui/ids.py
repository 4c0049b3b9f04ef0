from __future__ import annotations

__all__ = [
    "IDs",
    "nav_link_id",
    "difficulty_filter_id",
    "category_filter_id",
]


class IDs:
    class Store:
        # Persisted key-value store (browser local storage) holding the page slot
        CURRENT_PAGE = "current-page-store"
        # Per-page selection state, recreated on every page render
        LANGUAGE_SELECTION = "language-selection"
        TUTORIAL_SELECTION = "tutorial-selection"
        TOOL_SELECTION = "tool-selection"

    class Control:
        # Navbar
        NAV_BRAND = "nav-brand"
        NAV_TOGGLER = "nav-toggler"
        NAV_COLLAPSE = "nav-collapse"

        # Page body
        PAGE_CONTENT = "page-content"

        # Languages page
        LANGUAGE_SEARCH = "language-search"
        LANGUAGE_GRID = "language-grid"

        # Tutorials page ("All" buttons use plain IDs, outside the pattern index space)
        TUTORIAL_GRID = "tutorial-grid"
        DIFFICULTY_FILTER_ALL = "difficulty-filter-all"

        # Tools page
        TOOL_GRID = "tool-grid"
        CATEGORY_FILTER_ALL = "category-filter-all"

    class Pattern:
        # pattern-matching "type" strings
        NAV_LINK = "nav-link"
        DIFFICULTY_FILTER = "difficulty-filter"
        CATEGORY_FILTER = "category-filter"


def nav_link_id(page: str) -> dict:
    return {"type": IDs.Pattern.NAV_LINK, "index": str(page)}


def difficulty_filter_id(value: str) -> dict:
    return {"type": IDs.Pattern.DIFFICULTY_FILTER, "index": str(value)}


def category_filter_id(value: str) -> dict:
    return {"type": IDs.Pattern.CATEGORY_FILTER, "index": value}
