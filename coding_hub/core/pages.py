from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, MutableMapping, Optional

logger = logging.getLogger(__name__)

CURRENT_PAGE_KEY = "current-page"


class Page(str, Enum):
    HOME = "home"
    LANGUAGES = "languages"
    TUTORIALS = "tutorials"
    TOOLS = "tools"
    COMMUNITY = "community"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class NavItem:
    """
    Display metadata for one navigation entry.

    :param label: human-readable button text
    :param icon: Bootstrap Icons class name (rendered as <i class="bi ...">)
    """
    label: str
    icon: str


# Insertion order is the navbar order
NAV_ITEMS: Dict[Page, NavItem] = {
    Page.HOME: NavItem(label="Home", icon="bi-house"),
    Page.LANGUAGES: NavItem(label="Languages", icon="bi-code-slash"),
    Page.TUTORIALS: NavItem(label="Tutorials", icon="bi-book"),
    Page.TOOLS: NavItem(label="Tools", icon="bi-wrench"),
    Page.COMMUNITY: NavItem(label="Community", icon="bi-people"),
}


def parse_page(value: Any, default: Page = Page.HOME) -> Page:
    """
    Coerce a stored value into a Page.

    Unknown values fall back to the default so a stale or hand-edited local
    storage entry never breaks the app.
    """
    if value is None:
        return default
    try:
        return Page(value)
    except ValueError:
        logger.warning(
            "Unknown page value in store; falling back to default",
            extra={"value": repr(value), "default": default.value},
        )
        return default


class PageSlot:
    """
    Read/write slot for the last viewed page, backed by an injected key-value store.

    Purpose:
    - Keeps the "current page" persistence out of the core: callers hand in whatever
      mapping they persist (a dcc.Store payload, a plain dict in tests)
    - Reads never fail: a missing or unrecognised value yields the default page
    """

    def __init__(
        self,
        store: Optional[MutableMapping[str, Any]] = None,
        key: str = CURRENT_PAGE_KEY,
        default: Page = Page.HOME,
    ):
        self._store: MutableMapping[str, Any] = store if store is not None else {}
        self.key = key
        self.default = default

    @property
    def store(self) -> MutableMapping[str, Any]:
        return self._store

    def read(self) -> Page:
        return parse_page(self._store.get(self.key), self.default)

    def write(self, page: Page | str) -> None:
        """
        Replace the stored page.

        Raises:
            ValueError: if page is not a known Page value
        """
        self._store[self.key] = Page(page).value
