import json
from pathlib import Path

import pytest

from coding_hub.config.loader import load_global_config
from coding_hub.config.model import GlobalConfig
from coding_hub.core.exceptions import ConfigError
from coding_hub.core.pages import Page


def _write_global(config_root: Path, payload) -> Path:
    config_root.mkdir(parents=True, exist_ok=True)
    (config_root / "global.json").write_text(json.dumps(payload), encoding="utf-8")
    return config_root


def test_load_global_config_reads_all_keys(tmp_path):
    root = _write_global(
        tmp_path / "config",
        {
            "ui_title": "Test Hub",
            "brand": "TH",
            "subtitle": "sub",
            "footer_text": "footer",
            "default_page": "tools",
        },
    )

    cfg = load_global_config(root)

    assert cfg == GlobalConfig(
        ui_title="Test Hub",
        brand="TH",
        subtitle="sub",
        footer_text="footer",
        default_page=Page.TOOLS,
    )


def test_missing_keys_fall_back_to_defaults(tmp_path):
    root = _write_global(tmp_path / "config", {"ui_title": "Only Title"})

    cfg = load_global_config(root)

    assert cfg.ui_title == "Only Title"
    assert cfg.brand == GlobalConfig().brand
    assert cfg.default_page == Page.HOME


def test_missing_global_json_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_global_config(tmp_path)


def test_unknown_default_page_raises_config_error(tmp_path):
    root = _write_global(tmp_path / "config", {"default_page": "settings"})

    with pytest.raises(ConfigError, match="Unknown default_page"):
        load_global_config(root)


def test_non_object_json_raises_config_error(tmp_path):
    root = _write_global(tmp_path / "config", ["not", "an", "object"])

    with pytest.raises(ConfigError):
        load_global_config(root)


def test_invalid_json_raises_config_error(tmp_path):
    root = tmp_path / "config"
    root.mkdir()
    (root / "global.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_global_config(root)


def test_repository_config_is_valid():
    repo_config = Path(__file__).resolve().parents[3] / "config"
    cfg = load_global_config(repo_config)
    assert cfg.ui_title == "Coding Resource Hub"
    assert cfg.default_page == Page.HOME
