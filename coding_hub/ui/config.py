from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from coding_hub.config.model import GlobalConfig
from coding_hub.core.catalog import CatalogStore


@dataclass
class AppConfig:
    """
    Holds shared state for the Dash app: config root, global UI config and the
    catalog store. This is passed into layout + callback registration
    functions instead of using module-level globals.
    """
    config_root: Path
    global_config: GlobalConfig = field(default_factory=GlobalConfig)
    catalog: Optional[CatalogStore] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.catalog is None:
            raise RuntimeError("AppConfig.catalog must be initialized.")
