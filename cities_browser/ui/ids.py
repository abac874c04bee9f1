from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    class Store:
        SELECTION_STATE = "selection-state"

    class Control:
        # Core selectors
        CATEGORY_SELECT = "category-select"
        TYPE_SELECT = "type-select"
        MEASURE_SELECT = "measure-select"
        RANGE_SLIDER = "range-slider"

        # Sidebar metadata
        SIDEBAR_DATASET_NAME = "sidebar-dataset-name"
        SIDEBAR_DATASET_META = "sidebar-dataset-meta"

        # Map + legend
        MAP_GRAPH = "map-graph"
        MAP_LEGEND = "map-legend"

        # Table + downloads
        CITY_TABLE = "city-table"
        DOWNLOAD_DATA = "download-data"
        DOWNLOAD_DATA_BTN = "download-data-btn"

        # Status bar
        STATUS_BAR = "status-bar"
