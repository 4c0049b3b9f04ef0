from __future__ import annotations

from pathlib import Path

import dash_bootstrap_components as dbc
import pytest
from dash import dcc, html

from coding_hub.config.model import GlobalConfig
from coding_hub.core.catalog import default_catalog
from coding_hub.core.entries import Difficulty
from coding_hub.core.filtering import derive_categories, filter_languages
from coding_hub.core.pages import Page
from coding_hub.ui.config import AppConfig
from coding_hub.ui.helpers import EMPTY_STATE_MESSAGE, difficulty_color
from coding_hub.ui.ids import IDs
from coding_hub.ui.layout.build_community_page import build_community_card
from coding_hub.ui.layout.build_languages_page import build_language_grid
from coding_hub.ui.layout.build_layout import build_layout, build_page
from coding_hub.ui.layout.build_tools_page import build_tool_card


def _make_ctx(**global_overrides) -> AppConfig:
    return AppConfig(
        config_root=Path("config"),
        global_config=GlobalConfig(**global_overrides),
        catalog=default_catalog(),
    )


def _walk(node):
    """Yield every component and text node in a Dash component tree."""
    yield node
    children = getattr(node, "children", None)
    if children is None or isinstance(node, str):
        return
    if not isinstance(children, (list, tuple)):
        children = [children]
    for child in children:
        yield from _walk(child)


def _texts(node):
    return [n for n in _walk(node) if isinstance(n, str)]


def _find(node, component_id):
    for n in _walk(node):
        if getattr(n, "id", None) == component_id:
            return n
    raise LookupError(component_id)


def _of_type(node, cls):
    return [n for n in _walk(node) if isinstance(n, cls)]


@pytest.mark.parametrize("page", list(Page))
def test_every_page_builds(page):
    body = build_page(page, _make_ctx())
    assert _texts(body)


def test_languages_page_starts_with_empty_search_and_full_grid():
    ctx = _make_ctx()
    body = build_page(Page.LANGUAGES, ctx)

    search = _find(body, IDs.Control.LANGUAGE_SEARCH)
    assert search.value == ""
    assert search.placeholder == "Search languages..."

    store = _find(body, IDs.Store.LANGUAGE_SELECTION)
    assert store.data == {"search_term": ""}

    grid = _find(body, IDs.Control.LANGUAGE_GRID)
    assert len(_of_type(grid, dbc.Card)) == len(ctx.catalog.languages)


def test_language_grid_no_match_renders_empty_state_only():
    visible = filter_languages(default_catalog().languages, "zzz-no-match")
    grid = build_language_grid(visible)

    assert EMPTY_STATE_MESSAGE in _texts(grid)
    assert _of_type(grid, dbc.Card) == []


def test_language_card_shows_syntax_sample():
    grid = build_language_grid(default_catalog().languages[:1])
    (pre,) = _of_type(grid, html.Pre)
    assert pre.children.startswith("function greet(name)")


def test_tutorials_page_buttons_and_all_levels_active():
    body = build_page(Page.TUTORIALS, _make_ctx())
    buttons = [b for b in _of_type(body, dbc.Button) if getattr(b, "id", None) is not None]

    assert buttons[0].id == IDs.Control.DIFFICULTY_FILTER_ALL
    assert [b.children for b in buttons] == ["All Levels", "Beginner", "Intermediate", "Advanced"]
    assert [b.outline for b in buttons] == [False, True, True, True]
    assert len(_of_type(_find(body, IDs.Control.TUTORIAL_GRID), dbc.Card)) == 6


def test_tools_page_buttons_follow_derived_categories():
    ctx = _make_ctx()
    body = build_page(Page.TOOLS, ctx)
    buttons = [b for b in _of_type(body, dbc.Button) if getattr(b, "id", None) is not None]

    assert buttons[0].id == IDs.Control.CATEGORY_FILTER_ALL
    assert all(isinstance(b.id, dict) for b in buttons[1:])
    assert [b.children for b in buttons] == ["All Categories", *derive_categories(ctx.catalog.tools)]
    assert _find(body, IDs.Store.TOOL_SELECTION).data == {"selected_category": None}


def test_tool_card_link_opens_new_tab():
    tool = default_catalog().tools[0]
    card = build_tool_card(tool)
    (button,) = _of_type(card, dbc.Button)
    assert button.href == tool.link
    assert button.target == "_blank"
    assert button.children == "Visit Tool"


def test_community_card_shows_member_badge():
    community = default_catalog().communities[0]
    card = build_community_card(community)
    assert "50M+ members" in _texts(card)


def test_home_page_uses_configured_title():
    body = build_page(Page.HOME, _make_ctx(ui_title="My Hub"))
    assert "Welcome to My Hub" in _texts(body)


@pytest.mark.parametrize(
    "difficulty, colour",
    [
        (Difficulty.BEGINNER, "success"),
        ("Intermediate", "warning"),
        (Difficulty.ADVANCED, "danger"),
        ("Expert", "secondary"),
        (None, "secondary"),
    ],
)
def test_difficulty_color(difficulty, colour):
    assert difficulty_color(difficulty) == colour


def test_layout_has_persisted_page_store_navbar_and_footer():
    ctx = _make_ctx(footer_text="bye", default_page=Page.COMMUNITY)
    layout = build_layout(ctx)

    store = _find(layout, IDs.Store.CURRENT_PAGE)
    assert isinstance(store, dcc.Store)
    assert store.storage_type == "local"

    links = _of_type(layout, dbc.NavLink)
    assert len(links) == 5
    assert [link.active for link in links] == [False, False, False, False, True]

    assert "bye" in _texts(layout)
    assert "Developer Community" in _texts(_find(layout, IDs.Control.PAGE_CONTENT))
