from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List, Mapping, Optional

import dash
from dash import ALL, Input, Output, State, exceptions

from coding_hub.core.pages import Page, PageSlot, parse_page
from coding_hub.ui.ids import IDs
from coding_hub.ui.layout.build_layout import build_page

if TYPE_CHECKING:
    from coding_hub.ui.config import AppConfig

logger = logging.getLogger(__name__)


def page_from_trigger(triggered_id: Any) -> Optional[Page]:
    """
    Pure helper: map the component that fired to the page it navigates to.
    Returns None when the trigger is not a navigation control.
    """
    if triggered_id == IDs.Control.NAV_BRAND:
        return Page.HOME
    if isinstance(triggered_id, Mapping) and triggered_id.get("type") == IDs.Pattern.NAV_LINK:
        return parse_page(triggered_id.get("index"))
    return None


def _store_payload(store_data: Any) -> dict:
    """
    Copy the local-storage payload into a fresh dict.

    Anything other than a mapping (a stale or hand-edited entry) is logged and
    treated as an empty store, so the page slot reads as the default.
    """
    if store_data is None:
        return {}
    if not isinstance(store_data, Mapping):
        logger.warning(
            "Page store payload is not a mapping; treating it as empty",
            extra={"value": repr(store_data)},
        )
        return {}
    return dict(store_data)


def write_current_page(store_data: Any, page: Page, default: Page = Page.HOME) -> dict:
    """Return a new store payload with the page slot replaced; never mutates the input."""
    slot = PageSlot(_store_payload(store_data), default=default)
    slot.write(page)
    return dict(slot.store)


def read_current_page(store_data: Any, default: Page = Page.HOME) -> Page:
    return PageSlot(_store_payload(store_data), default=default).read()


def nav_active_flags(page: Page, output_ids: List[Mapping[str, Any]]) -> List[bool]:
    """One 'active' flag per nav link, in the order Dash lists the outputs."""
    return [str(o.get("index")) == page.value for o in output_ids]


def next_menu_state(triggered_id: Any, is_open: Optional[bool]) -> bool:
    """Toggler flips the collapsed menu; any navigation closes it."""
    if triggered_id == IDs.Control.NAV_TOGGLER:
        return not bool(is_open)
    return False


def register_navigation_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    default_page = ctx.global_config.default_page

    # ---------------------------------------------------------
    # Nav click -> page slot
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.CURRENT_PAGE, "data"),
        Input(IDs.Control.NAV_BRAND, "n_clicks"),
        Input({"type": IDs.Pattern.NAV_LINK, "index": ALL}, "n_clicks"),
        State(IDs.Store.CURRENT_PAGE, "data"),
        prevent_initial_call=True,
    )
    def update_current_page(_brand_clicks, _link_clicks, store_data):
        page = page_from_trigger(dash.ctx.triggered_id)
        if page is None:
            raise exceptions.PreventUpdate

        logger.info("page_change", extra={"page": page.value})
        return write_current_page(store_data, page, default=default_page)

    # ---------------------------------------------------------
    # Page slot -> page body + active nav link
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.PAGE_CONTENT, "children"),
        Output({"type": IDs.Pattern.NAV_LINK, "index": ALL}, "active"),
        Input(IDs.Store.CURRENT_PAGE, "data"),
    )
    def render_current_page(store_data):
        page = read_current_page(store_data, default=default_page)
        nav_outputs = [o["id"] for o in dash.ctx.outputs_list[1]]
        return build_page(page, ctx), nav_active_flags(page, nav_outputs)

    # ---------------------------------------------------------
    # Collapsed (mobile) menu
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.NAV_COLLAPSE, "is_open"),
        Input(IDs.Control.NAV_TOGGLER, "n_clicks"),
        Input({"type": IDs.Pattern.NAV_LINK, "index": ALL}, "n_clicks"),
        State(IDs.Control.NAV_COLLAPSE, "is_open"),
        prevent_initial_call=True,
    )
    def toggle_menu(_toggler_clicks, _link_clicks, is_open):
        return next_menu_state(dash.ctx.triggered_id, is_open)
