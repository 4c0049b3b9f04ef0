from __future__ import annotations

from dataclasses import dataclass

from coding_hub.core.pages import Page


@dataclass(frozen=True)
class GlobalConfig:
    """
    UI-level settings read from global.json.

    - ui_title: browser tab title
    - brand: text of the navbar brand button
    - subtitle: small caption under the brand
    - footer_text: text shown in the page footer
    - default_page: page shown when local storage has no remembered page
    """
    ui_title: str = "Coding Resource Hub"
    brand: str = "Coding Hub"
    subtitle: str = "Languages, tutorials, tools and communities"
    footer_text: str = "© 2024 Coding Resource Hub. Built with Dash."
    default_page: Page = Page.HOME
