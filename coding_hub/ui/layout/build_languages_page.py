from __future__ import annotations

from typing import Iterable

import dash_bootstrap_components as dbc
from dash import dcc, html

from coding_hub.core.entries import LanguageEntry
from coding_hub.core.filtering import filter_languages
from coding_hub.core.selection_state import LanguageSelection
from coding_hub.ui.helpers import card_grid, card_header, page_container, page_header
from coding_hub.ui.ids import IDs


def build_language_card(language: LanguageEntry) -> dbc.Card:
    return dbc.Card(
        dbc.CardBody(
            [
                card_header(
                    language.name,
                    dbc.Badge(language.category, color="light", text_color="dark", className="border"),
                ),
                html.P(language.description, className="card-text text-muted"),
                html.Div(
                    [
                        html.Span("Popularity:", className="small fw-semibold"),
                        html.Span(language.popularity, className="small text-muted"),
                    ],
                    className="d-flex justify-content-between mb-3",
                ),
                html.Span("Example Syntax:", className="small fw-semibold d-block mb-2"),
                html.Pre(language.syntax_sample, className="ch-syntax p-3 rounded small mb-0"),
            ]
        ),
        className="h-100 ch-card",
    )


def build_language_grid(languages: Iterable[LanguageEntry]):
    return card_grid(build_language_card(lang) for lang in languages)


def build_languages_page(ctx: "AppConfig", selection: LanguageSelection) -> dbc.Container:
    visible = filter_languages(ctx.catalog.languages, selection.search_term)

    search = dbc.Input(
        id=IDs.Control.LANGUAGE_SEARCH,
        type="text",
        placeholder="Search languages...",
        value=selection.search_term,
        className="ch-search",
        style={"maxWidth": "28rem"},
    )

    return page_container(
        [
            dcc.Store(
                id=IDs.Store.LANGUAGE_SELECTION,
                storage_type="memory",
                data=selection.to_dict(),
            ),
            page_header(
                "Programming Languages",
                "Discover popular programming languages and their unique characteristics.",
                [search],
            ),
            html.Div(build_language_grid(visible), id=IDs.Control.LANGUAGE_GRID),
        ]
    )
