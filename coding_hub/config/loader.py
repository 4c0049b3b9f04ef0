from __future__ import annotations

import json
import logging
from pathlib import Path

from coding_hub.config.model import GlobalConfig
from coding_hub.core.exceptions import ConfigError
from coding_hub.core.pages import Page

logger = logging.getLogger(__name__)


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load the UI configuration from a directory.

    Expected structure:

        root/
            global.json

    Keys missing from global.json fall back to the GlobalConfig defaults:

    - ui_title: title for the browser tab
    - brand: navbar brand text
    - subtitle: navbar caption
    - footer_text: footer line
    - default_page: one of home/languages/tutorials/tools/community

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if global.json is not a JSON object or default_page is unknown.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    with global_path.open(encoding="utf-8") as f:
        try:
            raw_global = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw_global, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    defaults = GlobalConfig()
    raw_page = raw_global.get("default_page", defaults.default_page.value)
    try:
        default_page = Page(raw_page)
    except ValueError:
        raise ConfigError(
            f"Unknown default_page '{raw_page}' in {global_path}; "
            f"expected one of {[p.value for p in Page]}"
        )

    config = GlobalConfig(
        ui_title=raw_global.get("ui_title", defaults.ui_title),
        brand=raw_global.get("brand", defaults.brand),
        subtitle=raw_global.get("subtitle", defaults.subtitle),
        footer_text=raw_global.get("footer_text", defaults.footer_text),
        default_page=default_page,
    )

    logger.info(
        "Global config loaded",
        extra={"ui_title": config.ui_title, "default_page": config.default_page.value},
    )
    return config
