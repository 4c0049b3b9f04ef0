from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

import dash_bootstrap_components as dbc
from dash import dcc, html

from coding_hub.core.entries import ToolEntry
from coding_hub.core.filtering import derive_categories, filter_tools
from coding_hub.core.selection_state import ToolSelection
from coding_hub.ui.helpers import (
    card_grid,
    card_header,
    filter_button,
    link_button,
    page_container,
    page_header,
)
from coding_hub.ui.ids import IDs, category_filter_id


def build_tool_card(tool: ToolEntry) -> dbc.Card:
    return dbc.Card(
        dbc.CardBody(
            [
                card_header(
                    tool.name,
                    dbc.Badge(tool.category, color="light", text_color="dark", className="border"),
                ),
                html.P(tool.description, className="card-text text-muted"),
                link_button("Visit Tool", tool.link),
            ]
        ),
        className="h-100 ch-card",
    )


def build_tool_grid(tools: Iterable[ToolEntry]):
    return card_grid(build_tool_card(t) for t in tools)


def build_category_buttons(categories: Sequence[str], selected: Optional[str]) -> List[dbc.Button]:
    buttons = [filter_button("All Categories", IDs.Control.CATEGORY_FILTER_ALL, selected is None)]
    for category in categories:
        buttons.append(filter_button(category, category_filter_id(category), selected == category))
    return buttons


def build_tools_page(ctx: "AppConfig", selection: ToolSelection) -> dbc.Container:
    tools = ctx.catalog.tools
    categories = derive_categories(tools)
    visible = filter_tools(tools, selection.selected_category)

    return page_container(
        [
            dcc.Store(
                id=IDs.Store.TOOL_SELECTION,
                storage_type="memory",
                data=selection.to_dict(),
            ),
            page_header(
                "Developer Tools",
                "Essential tools and utilities to enhance your development workflow.",
                [html.Div(build_category_buttons(categories, selection.selected_category), className="d-flex flex-wrap")],
            ),
            html.Div(build_tool_grid(visible), id=IDs.Control.TOOL_GRID),
        ]
    )
