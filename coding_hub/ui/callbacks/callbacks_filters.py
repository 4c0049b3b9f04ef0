from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Tuple

import dash
from dash import ALL, Input, Output, exceptions

from coding_hub.core.entries import Difficulty
from coding_hub.core.exceptions import UnreachableStateError
from coding_hub.core.filtering import filter_languages, filter_tools, filter_tutorials
from coding_hub.core.selection_state import LanguageSelection, ToolSelection, TutorialSelection
from coding_hub.ui.ids import IDs
from coding_hub.ui.layout.build_languages_page import build_language_grid
from coding_hub.ui.layout.build_tools_page import build_tool_grid
from coding_hub.ui.layout.build_tutorials_page import build_tutorial_grid

if TYPE_CHECKING:
    from coding_hub.ui.config import AppConfig

logger = logging.getLogger(__name__)


def _pattern_index(triggered_id: Any, pattern_type: str) -> Optional[str]:
    if isinstance(triggered_id, Mapping) and triggered_id.get("type") == pattern_type:
        return triggered_id.get("index")
    return None


def tutorial_selection_from_trigger(triggered_id: Any) -> Optional[TutorialSelection]:
    """
    Pure helper: the difficulty button that fired -> new TutorialSelection.
    Returns None when the trigger is not a difficulty button.
    """
    if triggered_id == IDs.Control.DIFFICULTY_FILTER_ALL:
        return TutorialSelection()
    index = _pattern_index(triggered_id, IDs.Pattern.DIFFICULTY_FILTER)
    if index is None:
        return None
    try:
        return TutorialSelection(selected_difficulty=Difficulty(index))
    except ValueError:
        raise UnreachableStateError(f"Difficulty button '{index}' is not one of the known levels")


def tool_selection_from_trigger(triggered_id: Any) -> Optional[ToolSelection]:
    """Same as tutorial_selection_from_trigger, for the category buttons."""
    if triggered_id == IDs.Control.CATEGORY_FILTER_ALL:
        return ToolSelection()
    index = _pattern_index(triggered_id, IDs.Pattern.CATEGORY_FILTER)
    if index is None:
        return None
    return ToolSelection(selected_category=index)


def outline_flags(selected: Optional[str], output_ids: List[Mapping[str, Any]]) -> Tuple[bool, List[bool]]:
    """
    'outline' flags for a filter button row: (All button, one per value button).
    Only the active button is solid; None selects the "All" button.
    """
    if selected is None:
        return False, [True for _ in output_ids]
    return True, [o.get("index") != str(selected) for o in output_ids]


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    catalog = ctx.catalog

    # ---------------------------------------------------------
    # Languages: search box -> selection -> grid
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.LANGUAGE_SELECTION, "data"),
        Input(IDs.Control.LANGUAGE_SEARCH, "value"),
        prevent_initial_call=True,
    )
    def update_language_selection(search_value: str | None):
        return LanguageSelection(search_term=search_value or "").to_dict()

    @app.callback(
        Output(IDs.Control.LANGUAGE_GRID, "children"),
        Input(IDs.Store.LANGUAGE_SELECTION, "data"),
    )
    def render_language_grid(selection_data: dict | None):
        selection = LanguageSelection.from_dict(selection_data)
        visible = filter_languages(catalog.languages, selection.search_term)
        logger.debug(
            "languages_filtered",
            extra={"search_term": selection.search_term, "n_visible": len(visible)},
        )
        return build_language_grid(visible)

    # ---------------------------------------------------------
    # Tutorials: difficulty buttons -> selection -> grid + button styles
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.TUTORIAL_SELECTION, "data"),
        Input(IDs.Control.DIFFICULTY_FILTER_ALL, "n_clicks"),
        Input({"type": IDs.Pattern.DIFFICULTY_FILTER, "index": ALL}, "n_clicks"),
        prevent_initial_call=True,
    )
    def update_tutorial_selection(_all_clicks, _level_clicks):
        selection = tutorial_selection_from_trigger(dash.ctx.triggered_id)
        if selection is None:
            raise exceptions.PreventUpdate
        return selection.to_dict()

    @app.callback(
        Output(IDs.Control.TUTORIAL_GRID, "children"),
        Output(IDs.Control.DIFFICULTY_FILTER_ALL, "outline"),
        Output({"type": IDs.Pattern.DIFFICULTY_FILTER, "index": ALL}, "outline"),
        Input(IDs.Store.TUTORIAL_SELECTION, "data"),
    )
    def render_tutorial_grid(selection_data: dict | None):
        selection = TutorialSelection.from_dict(selection_data)
        visible = filter_tutorials(catalog.tutorials, selection.selected_difficulty)
        selected = selection.selected_difficulty
        button_ids = [o["id"] for o in dash.ctx.outputs_list[2]]
        all_outline, level_outlines = outline_flags(
            selected.value if selected is not None else None, button_ids
        )
        return build_tutorial_grid(visible), all_outline, level_outlines

    # ---------------------------------------------------------
    # Tools: category buttons -> selection -> grid + button styles
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.TOOL_SELECTION, "data"),
        Input(IDs.Control.CATEGORY_FILTER_ALL, "n_clicks"),
        Input({"type": IDs.Pattern.CATEGORY_FILTER, "index": ALL}, "n_clicks"),
        prevent_initial_call=True,
    )
    def update_tool_selection(_all_clicks, _category_clicks):
        selection = tool_selection_from_trigger(dash.ctx.triggered_id)
        if selection is None:
            raise exceptions.PreventUpdate
        return selection.to_dict()

    @app.callback(
        Output(IDs.Control.TOOL_GRID, "children"),
        Output(IDs.Control.CATEGORY_FILTER_ALL, "outline"),
        Output({"type": IDs.Pattern.CATEGORY_FILTER, "index": ALL}, "outline"),
        Input(IDs.Store.TOOL_SELECTION, "data"),
    )
    def render_tool_grid(selection_data: dict | None):
        selection = ToolSelection.from_dict(selection_data)
        visible = filter_tools(catalog.tools, selection.selected_category)
        button_ids = [o["id"] for o in dash.ctx.outputs_list[2]]
        all_outline, category_outlines = outline_flags(selection.selected_category, button_ids)
        return build_tool_grid(visible), all_outline, category_outlines
