from __future__ import annotations

import pytest

from coding_hub.core.entries import Difficulty
from coding_hub.core.exceptions import UnreachableStateError
from coding_hub.core.pages import CURRENT_PAGE_KEY, Page
from coding_hub.core.selection_state import ToolSelection, TutorialSelection
from coding_hub.ui.callbacks.callbacks_filters import (
    outline_flags,
    tool_selection_from_trigger,
    tutorial_selection_from_trigger,
)
from coding_hub.ui.callbacks.callbacks_navigation import (
    nav_active_flags,
    next_menu_state,
    page_from_trigger,
    read_current_page,
    write_current_page,
)
from coding_hub.ui.ids import (
    IDs,
    category_filter_id,
    difficulty_filter_id,
    nav_link_id,
)


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------

def test_brand_navigates_home():
    assert page_from_trigger(IDs.Control.NAV_BRAND) == Page.HOME


@pytest.mark.parametrize("page", list(Page))
def test_nav_link_navigates_to_its_page(page):
    assert page_from_trigger(nav_link_id(page.value)) == page


def test_non_navigation_trigger_is_ignored():
    assert page_from_trigger(None) is None
    assert page_from_trigger(IDs.Control.NAV_TOGGLER) is None
    assert page_from_trigger(difficulty_filter_id("Beginner")) is None


def test_write_current_page_returns_new_payload():
    original = {CURRENT_PAGE_KEY: "home", "other": 1}
    updated = write_current_page(original, Page.TOOLS)

    assert updated == {CURRENT_PAGE_KEY: "tools", "other": 1}
    assert original[CURRENT_PAGE_KEY] == "home"


def test_write_current_page_from_empty_store():
    assert write_current_page(None, Page.LANGUAGES) == {CURRENT_PAGE_KEY: "languages"}


def test_read_current_page_defaults():
    assert read_current_page(None) == Page.HOME
    assert read_current_page({}, default=Page.TUTORIALS) == Page.TUTORIALS
    assert read_current_page({CURRENT_PAGE_KEY: "bogus"}) == Page.HOME
    assert read_current_page({CURRENT_PAGE_KEY: "community"}) == Page.COMMUNITY


@pytest.mark.parametrize("payload", ["tools", 5, ["x"], ""])
def test_read_current_page_non_mapping_payload_falls_back(payload, caplog):
    with caplog.at_level("WARNING"):
        assert read_current_page(payload) == Page.HOME
        assert read_current_page(payload, default=Page.TOOLS) == Page.TOOLS
    assert "not a mapping" in caplog.text


@pytest.mark.parametrize("payload", ["tools", 5])
def test_write_current_page_replaces_non_mapping_payload(payload):
    assert write_current_page(payload, Page.COMMUNITY) == {CURRENT_PAGE_KEY: "community"}



def test_nav_active_flags_marks_only_current_page():
    output_ids = [nav_link_id(p.value) for p in Page]
    assert nav_active_flags(Page.TUTORIALS, output_ids) == [False, False, True, False, False]


def test_menu_toggler_flips_and_navigation_closes():
    assert next_menu_state(IDs.Control.NAV_TOGGLER, False) is True
    assert next_menu_state(IDs.Control.NAV_TOGGLER, True) is False
    assert next_menu_state(IDs.Control.NAV_TOGGLER, None) is True
    assert next_menu_state(nav_link_id("tools"), True) is False


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------

def test_all_levels_button_clears_difficulty():
    assert tutorial_selection_from_trigger(IDs.Control.DIFFICULTY_FILTER_ALL) == TutorialSelection()


@pytest.mark.parametrize("level", list(Difficulty))
def test_difficulty_button_selects_level(level):
    selection = tutorial_selection_from_trigger(difficulty_filter_id(level.value))
    assert selection == TutorialSelection(selected_difficulty=level)


def test_unknown_difficulty_button_is_unreachable():
    with pytest.raises(UnreachableStateError):
        tutorial_selection_from_trigger(difficulty_filter_id("Expert"))


def test_tutorial_trigger_ignores_other_controls():
    assert tutorial_selection_from_trigger(category_filter_id("DevOps")) is None
    assert tutorial_selection_from_trigger(None) is None


def test_category_buttons():
    assert tool_selection_from_trigger(IDs.Control.CATEGORY_FILTER_ALL) == ToolSelection()
    assert tool_selection_from_trigger(category_filter_id("DevOps")) == ToolSelection(selected_category="DevOps")
    assert tool_selection_from_trigger(nav_link_id("tools")) is None


def test_outline_flags_only_active_button_is_solid():
    output_ids = [category_filter_id("Editors"), category_filter_id("DevOps")]
    assert outline_flags(None, output_ids) == (False, [True, True])
    assert outline_flags("DevOps", output_ids) == (True, [True, False])


def test_category_named_like_a_sentinel_is_selectable():
    selection = tool_selection_from_trigger(category_filter_id("__all__"))
    assert selection == ToolSelection(selected_category="__all__")

    output_ids = [category_filter_id("__all__"), category_filter_id("DevOps")]
    assert outline_flags("__all__", output_ids) == (True, [False, True])


def test_all_buttons_are_not_pattern_ids():
    assert isinstance(IDs.Control.DIFFICULTY_FILTER_ALL, str)
    assert isinstance(IDs.Control.CATEGORY_FILTER_ALL, str)
    assert tool_selection_from_trigger(IDs.Control.DIFFICULTY_FILTER_ALL) is None
    assert tutorial_selection_from_trigger(IDs.Control.CATEGORY_FILTER_ALL) is None
