from __future__ import annotations

import logging
import os
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from cities_browser.config.loader import load_app_data
from cities_browser.core.filter_state import SelectionState
from cities_browser.core.selection import update_selection
from cities_browser.ui.callbacks.callbacks_filters import register_filter_callbacks
from cities_browser.ui.callbacks.callbacks_io import register_io_callbacks
from cities_browser.ui.callbacks.callbacks_render import register_render_callbacks
from cities_browser.ui.callbacks.callbacks_sync import register_sync_callbacks
from cities_browser.ui.helpers import warn_on_invalid_dataset
from cities_browser.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def initial_selection(ctx: AppConfig) -> SelectionState:
    cfg = ctx.global_config
    return update_selection(
        ctx.dataset,
        None,
        category_id=cfg.default_category,
        type_id=cfg.default_type,
        measure=None,
    )


def create_dash_app(config_root: Path | str | None = None) -> Dash:
    if config_root is None:
        config_root = os.getenv("CITIES_BROWSER_CONFIG_ROOT", "config")
    config_root = Path(config_root)

    # 1) Load config + dataset (LoadError/ConfigError halt startup)
    global_config, dataset = load_app_data(config_root)
    warn_on_invalid_dataset(dataset, logger)

    # 2) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        dataset=dataset,
    )
    ctx.validate()

    initial = initial_selection(ctx)
    logger.info("initial_selection", extra=initial.to_dict())

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )

    app.title = getattr(global_config, "ui_title", "500 Cities Health Explorer")

    app.layout = build_layout(ctx, initial)

    # Register callbacks
    register_filter_callbacks(app, ctx)
    register_sync_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_io_callbacks(app, ctx)

    return app
