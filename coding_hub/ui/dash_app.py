from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from coding_hub.config.loader import load_global_config
from coding_hub.core.catalog import CatalogStore, default_catalog
from coding_hub.ui.layout.build_layout import build_layout
from coding_hub.ui.callbacks.callbacks_navigation import register_navigation_callbacks
from coding_hub.ui.callbacks.callbacks_filters import register_filter_callbacks

logger = logging.getLogger(__name__)


def create_dash_app(
    config_root: Path | str = Path("config"),
    catalog: CatalogStore | None = None,
) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Catalogs (compiled-in unless a caller injects its own)
    if catalog is None:
        catalog = default_catalog()

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        catalog=catalog,
    )
    ctx.validate()

    # Resolve the assets folder relative to this file so styles.css is found
    # regardless of where the app is started from.
    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY, dbc.icons.BOOTSTRAP],
        assets_folder=str(assets_path),
        # Page bodies (and their filter controls) are swapped in by callbacks
        suppress_callback_exceptions=True,
    )

    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_navigation_callbacks(app, ctx)
    register_filter_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={
            "config_root": str(config_root),
            "default_page": global_config.default_page.value,
            "n_languages": len(catalog.languages),
            "n_tutorials": len(catalog.tutorials),
            "n_tools": len(catalog.tools),
            "n_communities": len(catalog.communities),
        },
    )
    return app
