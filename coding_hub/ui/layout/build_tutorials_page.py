from __future__ import annotations

from typing import Iterable, List, Optional

import dash_bootstrap_components as dbc
from dash import dcc, html

from coding_hub.core.entries import DIFFICULTY_LEVELS, Difficulty, TutorialEntry
from coding_hub.core.filtering import filter_tutorials
from coding_hub.core.selection_state import TutorialSelection
from coding_hub.ui.helpers import (
    card_grid,
    card_header,
    difficulty_color,
    filter_button,
    link_button,
    page_container,
    page_header,
)
from coding_hub.ui.ids import IDs, difficulty_filter_id


def build_tutorial_card(tutorial: TutorialEntry) -> dbc.Card:
    return dbc.Card(
        dbc.CardBody(
            [
                card_header(
                    tutorial.title,
                    dbc.Badge(str(tutorial.difficulty), color=difficulty_color(tutorial.difficulty)),
                ),
                html.P(tutorial.description, className="card-text text-muted"),
                html.Div(
                    [
                        html.Span(tutorial.category, className="small text-muted"),
                        html.Span(tutorial.duration, className="small fw-semibold"),
                    ],
                    className="d-flex justify-content-between align-items-center",
                ),
                link_button("Start Tutorial", tutorial.link, outline=True),
            ]
        ),
        className="h-100 ch-card",
    )


def build_tutorial_grid(tutorials: Iterable[TutorialEntry]):
    return card_grid(build_tutorial_card(t) for t in tutorials)


def build_difficulty_buttons(selected: Optional[Difficulty]) -> List[dbc.Button]:
    buttons = [filter_button("All Levels", IDs.Control.DIFFICULTY_FILTER_ALL, selected is None)]
    for level in DIFFICULTY_LEVELS:
        buttons.append(
            filter_button(level.value, difficulty_filter_id(level.value), selected == level)
        )
    return buttons


def build_tutorials_page(ctx: "AppConfig", selection: TutorialSelection) -> dbc.Container:
    visible = filter_tutorials(ctx.catalog.tutorials, selection.selected_difficulty)

    return page_container(
        [
            dcc.Store(
                id=IDs.Store.TUTORIAL_SELECTION,
                storage_type="memory",
                data=selection.to_dict(),
            ),
            page_header(
                "Tutorials",
                "Comprehensive tutorials to help you learn and master programming concepts.",
                [html.Div(build_difficulty_buttons(selection.selected_difficulty), className="d-flex flex-wrap")],
            ),
            html.Div(build_tutorial_grid(visible), id=IDs.Control.TUTORIAL_GRID),
        ]
    )
