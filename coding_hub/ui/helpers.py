from __future__ import annotations

from typing import Any, Iterable, List, Optional

import dash_bootstrap_components as dbc
from dash import html

from coding_hub.core.entries import Difficulty

EMPTY_STATE_MESSAGE = "No matching entries found"

# Bootstrap contextual colours for the tutorial difficulty badge
DIFFICULTY_BADGE_COLORS = {
    Difficulty.BEGINNER: "success",
    Difficulty.INTERMEDIATE: "warning",
    Difficulty.ADVANCED: "danger",
}


def difficulty_color(difficulty: Optional[str]) -> str:
    try:
        return DIFFICULTY_BADGE_COLORS[Difficulty(difficulty)]
    except ValueError:
        return "secondary"


def empty_state(message: str = EMPTY_STATE_MESSAGE) -> html.Div:
    """Shown in place of a card grid when a filter leaves nothing to display."""
    return html.Div(
        html.P(message, className="text-muted mb-0"),
        className="text-center py-5 ch-empty-state",
    )


def card_grid(cards: Iterable[Any]) -> html.Div | dbc.Row:
    """
    Lay cards out in a responsive grid (1 / 2 / 3 columns).
    Returns the empty-state block when there are no cards.
    """
    cols = [dbc.Col(card, md=6, lg=4, className="mb-4") for card in cards]
    if not cols:
        return empty_state()
    return dbc.Row(cols, className="g-4 ch-card-grid")


def card_header(title: str, badge: Any) -> html.Div:
    return html.Div(
        [
            html.H5(title, className="card-title mb-0"),
            badge,
        ],
        className="d-flex justify-content-between align-items-start mb-2",
    )


def link_button(label: str, href: str, outline: bool = False) -> dbc.Button:
    """Button that opens an entry's link in a new browser tab."""
    return dbc.Button(
        label,
        href=href,
        target="_blank",
        external_link=True,
        color="primary",
        outline=outline,
        className="w-100 mt-3",
    )


def filter_button(label: str, component_id: str | dict, active: bool) -> dbc.Button:
    """Filter chip: solid when active, outlined otherwise."""
    return dbc.Button(
        label,
        id=component_id,
        color="primary",
        outline=not active,
        size="sm",
        n_clicks=0,
        className="me-2 mb-2",
    )


def page_header(title: str, lead: str, controls: Optional[List[Any]] = None) -> html.Div:
    children: List[Any] = [
        html.H1(title, className="fw-bold mb-3"),
        html.P(lead, className="text-muted mb-4"),
    ]
    if controls:
        children.extend(controls)
    return html.Div(children, className="mb-4")


def page_container(children: List[Any]) -> dbc.Container:
    return dbc.Container(children, className="py-5 ch-page")
