from __future__ import annotations

from typing import Optional, Sequence

import pandas as pd
import plotly.graph_objs as go
from plotly.graph_objs import Figure

from cities_browser.core.base_view import BaseView
from cities_browser.core.colors import DEFAULT_BIN_COUNT
from cities_browser.core.dataset import Dataset
from cities_browser.core.filter_state import SelectionState
from cities_browser.core.pipeline import PipelineResult

POINT_COLUMNS = ["lat", "lng", "label", "color", "value", "hover"]

# Contiguous US
DEFAULT_CENTER = {"lat": 39.5, "lon": -98.35}
DEFAULT_ZOOM = 3.0


class MapView(BaseView):
    """
    City markers on a tile map

    - one marker per record with a usable GeoLocation
    - marker color from the binned value
    - hover shows city, measure value, year and population
    """

    id = "map"
    label = "City Map"

    map_style = "carto-positron"

    def __init__(
        self,
        dataset: Dataset,
        palette: Optional[Sequence[str]] = None,
        bin_count: int = DEFAULT_BIN_COUNT,
        zoom: float = DEFAULT_ZOOM,
    ):
        super().__init__(dataset, palette=palette, bin_count=bin_count)
        self.zoom = zoom

    def data_from_result(self, result: PipelineResult) -> pd.DataFrame:
        if not result.map_points:
            return pd.DataFrame(columns=POINT_COLUMNS)
        return pd.DataFrame([p.to_dict() for p in result.map_points], columns=POINT_COLUMNS)

    def render_figure(self, data: pd.DataFrame, state: SelectionState) -> Figure:
        title = state.measure or "No measure selected"

        if data.empty:
            fig = self.empty_figure(f"{title} (no cities in the selected range)")
            fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
            return fig

        fig = go.Figure(
            go.Scattermap(
                lat=data["lat"],
                lon=data["lng"],
                mode="markers",
                marker=dict(size=9, color=data["color"], opacity=0.85),
                text=data["label"],
                hovertext=data["hover"],
                hoverinfo="text",
                customdata=data["value"],
                showlegend=False,
            )
        )
        fig.update_layout(
            title=title,
            map=dict(style=self.map_style, center=DEFAULT_CENTER, zoom=self.zoom),
            margin=dict(l=0, r=0, t=40, b=0),
        )
        return fig
