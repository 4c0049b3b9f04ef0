from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

from .entries import Difficulty, LanguageEntry, ToolEntry, TutorialEntry

# All filters are a single linear pass: catalogs are small and re-filtered on
# every input change, so there is no index to keep in sync.


def _fold(text: Optional[str]) -> str:
    return (text or "").casefold()


def language_matches(entry: LanguageEntry, search_term: str) -> bool:
    """Checks if a language matches a search term on name, description or category."""
    needle = _fold(search_term)
    if not needle:
        return True
    return (
        needle in _fold(entry.name)
        or needle in _fold(entry.description)
        or needle in _fold(entry.category)
    )


def filter_languages(
    catalog: Sequence[LanguageEntry],
    search_term: Optional[str],
) -> Tuple[LanguageEntry, ...]:
    """
    Return the languages whose name, description or category contains the search term.

    Matching is case-insensitive substring containment; an empty (or None) term matches
    every entry. Entries keep their catalog order.

    :param catalog: the full languages catalog
    :param search_term: raw text from the search box
    :return: the visible subsequence (possibly empty)
    """
    return tuple(entry for entry in catalog if language_matches(entry, search_term or ""))


def filter_tutorials(
    catalog: Sequence[TutorialEntry],
    selected_difficulty: Optional[Difficulty | str],
) -> Tuple[TutorialEntry, ...]:
    """
    Return the tutorials at the selected difficulty, or all of them when none is selected.
    Difficulty is a closed set, so the comparison is exact.
    """
    if selected_difficulty is None:
        return tuple(catalog)
    return tuple(entry for entry in catalog if entry.difficulty == selected_difficulty)


def filter_tools(
    catalog: Sequence[ToolEntry],
    selected_category: Optional[str],
) -> Tuple[ToolEntry, ...]:
    """Exact category match; None means 'All Categories'."""
    if selected_category is None:
        return tuple(catalog)
    return tuple(entry for entry in catalog if entry.category == selected_category)


def derive_categories(tool_catalog: Iterable[ToolEntry]) -> Tuple[str, ...]:
    """
    Distinct tool categories, used to populate the category filter buttons.

    Returned in order of first appearance so the buttons follow catalog order.
    The result contains every category present exactly once and nothing else.
    """
    return tuple(dict.fromkeys(entry.category for entry in tool_catalog))
