from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Union

from .entries import Difficulty
from .exceptions import UnreachableStateError
from .pages import Page


@dataclass
class LanguageSelection:
    """
    Current search box text on the languages page.

    An empty string means "show everything".
    """
    search_term: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> LanguageSelection:
        data = data or {}
        return cls(search_term=str(data.get("search_term") or ""))


@dataclass
class TutorialSelection:
    """
    Current difficulty filter on the tutorials page.

    Fields:

    - selected_difficulty: one of the three Difficulty levels, or None for "All Levels"
    """
    selected_difficulty: Optional[Difficulty] = None

    def to_dict(self) -> Dict[str, Any]:
        value = self.selected_difficulty
        return {"selected_difficulty": value.value if value is not None else None}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> TutorialSelection:
        raw = (data or {}).get("selected_difficulty")
        if raw is None:
            return cls()
        try:
            return cls(selected_difficulty=Difficulty(raw))
        except ValueError:
            raise UnreachableStateError(f"Difficulty '{raw}' is not one of the known levels")


@dataclass
class ToolSelection:
    """Current category filter on the tools page; None means "All Categories"."""
    selected_category: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> ToolSelection:
        raw = (data or {}).get("selected_category")
        return cls(selected_category=None if raw is None else str(raw))


Selection = Union[LanguageSelection, TutorialSelection, ToolSelection]

_SELECTION_BY_PAGE = {
    Page.LANGUAGES: LanguageSelection,
    Page.TUTORIALS: TutorialSelection,
    Page.TOOLS: ToolSelection,
}


def default_selection(page: Page | str) -> Optional[Selection]:
    """
    Fresh default state for a page, or None for pages without filters.

    Called every time a page is shown, so filters never carry across navigation.
    """
    cls = _SELECTION_BY_PAGE.get(Page(page))
    return cls() if cls is not None else None
