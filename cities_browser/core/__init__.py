"""
Core domain layer: dataset abstraction, selection state, filter pipeline,
coordinate parsing, color binning and the view base class
"""

from .dataset import Columns, Dataset
from .filter_state import SelectionState
from .pipeline import PipelineResult, run_pipeline
from .base_view import BaseView

__all__ = ["Columns", "Dataset", "SelectionState", "PipelineResult", "run_pipeline", "BaseView"]
