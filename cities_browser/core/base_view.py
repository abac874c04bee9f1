from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

import plotly.graph_objs as go

from .colors import DEFAULT_BIN_COUNT, DEFAULT_PALETTE
from .dataset import Dataset
from .filter_state import SelectionState
from .pipeline import PipelineResult, run_pipeline


class BaseView(ABC):
    """
    Abstract base class for all plot views.

    Defines the contract that every view in the app must follow
    - expose an 'id' - used internally
    - expose a 'label' - used for UI/human-readable applications
    - implement 'data_from_result' - turn a PipelineResult into the view's data
    - implement 'render_figure' - used to render the figure using Plotly
    """

    id: str = None
    label: str = None

    def __init__(
        self,
        dataset: Dataset,
        palette: Optional[Sequence[str]] = None,
        bin_count: int = DEFAULT_BIN_COUNT,
    ):
        self.dataset = dataset
        self.palette = list(palette) if palette else DEFAULT_PALETTE
        self.bin_count = bin_count

    @abstractmethod
    def data_from_result(self, result: PipelineResult) -> Any:
        """
        Extract this view's data from an already computed pipeline run
        :param result: the {@link PipelineResult} for the current SelectionState
        :return: data ready for {@link render_figure()}
        """
        raise NotImplementedError()

    @abstractmethod
    def render_figure(self, data: Any, state: SelectionState) -> go.Figure:
        """
        Render the figure given the computed data
        :param data: the data provided by {@link data_from_result()}
        :param state: the current {@link SelectionState}
        :return: the Plotly figure for these parameters
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    def run(self, state: SelectionState) -> PipelineResult:
        """
        Run the filter pipeline for this view's Dataset.

        All views should call this instead of the filter stages directly,
        so palette and bin settings are applied in one place.
        """
        return run_pipeline(
            self.dataset,
            state,
            palette=self.palette,
            bin_count=self.bin_count,
        )

    def compute_data(self, state: SelectionState) -> Any:
        return self.data_from_result(self.run(state))

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig
