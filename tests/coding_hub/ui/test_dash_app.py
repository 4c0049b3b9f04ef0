from __future__ import annotations

import json

import pytest
from dash import Dash

from coding_hub.core.catalog import CatalogStore, default_catalog
from coding_hub.ui.dash_app import create_dash_app
from coding_hub.ui.config import AppConfig


def _write_config(tmp_path, **payload):
    (tmp_path / "global.json").write_text(json.dumps(payload), encoding="utf-8")
    return tmp_path


def test_create_dash_app_uses_config_title(tmp_path):
    root = _write_config(tmp_path, ui_title="Hub Under Test")

    app = create_dash_app(root)

    assert isinstance(app, Dash)
    assert app.title == "Hub Under Test"
    assert app.layout is not None
    assert len(app.callback_map) > 0


def test_create_dash_app_accepts_injected_catalog(tmp_path):
    root = _write_config(tmp_path)
    catalog = CatalogStore(tools=default_catalog().tools[:2])

    app = create_dash_app(root, catalog=catalog)

    assert isinstance(app, Dash)


def test_create_dash_app_missing_config_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        create_dash_app(tmp_path)


def test_app_config_validate_requires_catalog(tmp_path):
    with pytest.raises(RuntimeError, match="catalog"):
        AppConfig(config_root=tmp_path).validate()
