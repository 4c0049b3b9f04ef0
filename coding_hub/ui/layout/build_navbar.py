from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from coding_hub.core.pages import NAV_ITEMS, Page
from coding_hub.ui.ids import IDs, nav_link_id


def build_nav_links(current_page: Page) -> dbc.Nav:
    return dbc.Nav(
        [
            dbc.NavItem(
                dbc.NavLink(
                    [html.I(className=f"bi {item.icon} me-2"), item.label],
                    id=nav_link_id(page.value),
                    active=page == current_page,
                    n_clicks=0,
                    className="ch-nav-link",
                )
            )
            for page, item in NAV_ITEMS.items()
        ],
        className="ms-auto",
        navbar=True,
        pills=True,
    )


def build_navbar(global_config, current_page: Page = Page.HOME) -> dbc.Navbar:
    brand = getattr(global_config, "brand", "Coding Hub")
    subtitle = getattr(global_config, "subtitle", "")

    return dbc.Navbar(
        dbc.Container(
            [
                # Left: brand button, always navigates home
                html.Div(
                    [
                        dbc.Button(
                            [html.I(className="bi bi-code-slash me-2"), brand],
                            id=IDs.Control.NAV_BRAND,
                            color="link",
                            n_clicks=0,
                            className="fs-4 fw-bold text-decoration-none ch-brand",
                        ),
                        html.Small(subtitle, className="text-muted d-none d-lg-inline"),
                    ],
                    className="d-flex align-items-center",
                ),
                dbc.NavbarToggler(id=IDs.Control.NAV_TOGGLER, n_clicks=0),
                dbc.Collapse(
                    build_nav_links(current_page),
                    id=IDs.Control.NAV_COLLAPSE,
                    is_open=False,
                    navbar=True,
                ),
            ]
        ),
        color="light",
        sticky="top",
        className="shadow-sm border-bottom ch-navbar",
    )
