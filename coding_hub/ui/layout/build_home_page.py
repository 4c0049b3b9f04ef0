from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from coding_hub.ui.helpers import page_container

# (icon, title, description) for the four domain cards
_DOMAIN_CARDS = [
    ("bi-code-slash", "Programming Languages",
     "Explore popular programming languages with syntax examples and use cases"),
    ("bi-book", "Tutorials", "Step-by-step guides and tutorials for all skill levels"),
    ("bi-wrench", "Developer Tools", "Essential tools and utilities to boost your productivity"),
    ("bi-people", "Community", "Connect with other developers and join coding communities"),
]

POPULAR_TECHNOLOGIES = ["JavaScript", "Python", "React", "Node.js", "TypeScript"]


def _domain_card(icon: str, title: str, description: str) -> dbc.Card:
    return dbc.Card(
        dbc.CardBody(
            [
                html.I(className=f"bi {icon} text-primary d-block mb-2 ch-domain-icon"),
                html.H5(title, className="card-title"),
                html.P(description, className="card-text text-muted"),
            ]
        ),
        className="h-100 ch-card",
    )


def build_home_page(ctx: "AppConfig") -> dbc.Container:
    cards = dbc.Row(
        [dbc.Col(_domain_card(*card), md=6, lg=3, className="mb-4") for card in _DOMAIN_CARDS],
        className="g-4",
    )

    journey = html.Div(
        [
            html.H2("Start Your Coding Journey", className="fw-bold mb-3"),
            html.P(
                "Whether you're a beginner or an experienced developer, "
                "find the resources you need to level up your skills.",
                className="lead text-muted mb-4",
            ),
            html.Div(
                [
                    dbc.Badge(tech, color="secondary", className="px-3 py-2 me-2 mb-2")
                    for tech in POPULAR_TECHNOLOGIES
                ],
                className="d-flex flex-wrap justify-content-center",
            ),
        ],
        className="mt-5 p-5 rounded text-center ch-journey",
    )

    return page_container(
        [
            html.Div(
                [
                    html.H1(f"Welcome to {ctx.global_config.ui_title}", className="fw-bold mb-3"),
                    html.P(
                        "Your comprehensive platform for programming languages, tutorials, tools, "
                        "and community connections. Everything you need to grow as a developer in one place.",
                        className="lead text-muted mx-auto",
                        style={"maxWidth": "48rem"},
                    ),
                ],
                className="text-center mb-5",
            ),
            cards,
            journey,
        ]
    )
