from __future__ import annotations

from typing import Iterable

import dash_bootstrap_components as dbc
from dash import html

from coding_hub.core.entries import CommunityEntry
from coding_hub.ui.helpers import card_grid, card_header, link_button, page_container, page_header

_REASONS = [
    ("bi-people", "Network & Connect",
     "Build professional relationships and connect with like-minded developers"),
    ("bi-book", "Learn & Grow",
     "Stay updated with latest trends and learn from experienced developers"),
    ("bi-code-slash", "Get Help",
     "Get answers to your coding questions and solve problems together"),
]


def build_community_card(community: CommunityEntry) -> dbc.Card:
    return dbc.Card(
        dbc.CardBody(
            [
                card_header(
                    community.name,
                    dbc.Badge(f"{community.member_count} members", color="secondary"),
                ),
                html.P(community.description, className="card-text text-muted"),
                link_button("Join Community", community.link),
            ]
        ),
        className="h-100 ch-card",
    )


def _why_join_section() -> dbc.Card:
    reasons = [
        dbc.Col(
            [
                html.I(className=f"bi {icon} text-primary d-block mb-3 ch-domain-icon"),
                html.H6(title, className="fw-semibold"),
                html.P(text, className="small text-muted"),
            ],
            md=4,
            className="text-center",
        )
        for icon, title, text in _REASONS
    ]
    return dbc.Card(
        dbc.CardBody(
            [
                html.H2("Why Join Developer Communities?", className="h4 fw-bold text-center mb-4"),
                dbc.Row(reasons, className="g-4"),
            ],
            className="p-5",
        ),
        className="mt-5",
    )


def build_community_page(ctx: "AppConfig") -> dbc.Container:
    communities: Iterable[CommunityEntry] = ctx.catalog.communities
    return page_container(
        [
            page_header(
                "Developer Community",
                "Connect with fellow developers, get help, and share knowledge in these amazing communities.",
            ),
            card_grid(build_community_card(c) for c in communities),
            _why_join_section(),
        ]
    )
