from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from coding_hub.core.pages import Page
from coding_hub.core.selection_state import default_selection
from coding_hub.ui.ids import IDs
from coding_hub.ui.layout.build_community_page import build_community_page
from coding_hub.ui.layout.build_home_page import build_home_page
from coding_hub.ui.layout.build_languages_page import build_languages_page
from coding_hub.ui.layout.build_navbar import build_navbar
from coding_hub.ui.layout.build_tools_page import build_tools_page
from coding_hub.ui.layout.build_tutorials_page import build_tutorials_page


def build_page(page: Page, ctx: "AppConfig"):
    """
    Build the body for a page with a fresh, default selection state.

    Every navigation goes through here, so filters reset whenever a page is revisited.
    """
    page = Page(page)
    selection = default_selection(page)

    if page == Page.LANGUAGES:
        return build_languages_page(ctx, selection)
    if page == Page.TUTORIALS:
        return build_tutorials_page(ctx, selection)
    if page == Page.TOOLS:
        return build_tools_page(ctx, selection)
    if page == Page.COMMUNITY:
        return build_community_page(ctx)
    return build_home_page(ctx)


def build_footer(global_config) -> html.Footer:
    return html.Footer(
        dbc.Container(
            html.P(getattr(global_config, "footer_text", ""), className="text-center text-muted mb-0"),
            className="py-4",
        ),
        className="border-top mt-5 ch-footer",
    )


def build_layout(ctx: "AppConfig"):
    default_page = ctx.global_config.default_page

    return html.Div(
        className="ch-root",
        children=[
            # App-level stores. The page slot lives in local storage so the last
            # viewed page survives reloads; it starts empty and reads as the default.
            dcc.Store(id=IDs.Store.CURRENT_PAGE, storage_type="local"),

            build_navbar(ctx.global_config, default_page),
            html.Main(
                build_page(default_page, ctx),
                id=IDs.Control.PAGE_CONTENT,
            ),
            build_footer(ctx.global_config),
        ],
    )
