from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Sequence

import numpy as np
from plotly.colors import sequential

DEFAULT_PALETTE: List[str] = list(sequential.YlOrRd)
DEFAULT_BIN_COUNT = 6


@dataclass(frozen=True)
class LegendEntry:
    lower: float
    upper: float
    color: str

    def label(self, precision: int = 1) -> str:
        return f"{self.lower:.{precision}f} to {self.upper:.{precision}f}"

    def to_dict(self) -> dict:
        return {"lower": self.lower, "upper": self.upper, "color": self.color}


class ColorBinner:
    """
    Maps a value onto one of `bin_count` equal-width bins over [lo, hi].

    Boundaries are not rounded. Values below lo / above hi are clamped into
    the first / last bin; a zero-width range puts everything in bin 0.
    """

    def __init__(self, colors: Sequence[str], lo: float, hi: float) -> None:
        self.colors = list(colors)
        self.lo = float(lo)
        self.hi = float(hi)

    @property
    def bin_count(self) -> int:
        return len(self.colors)

    @property
    def edges(self) -> np.ndarray:
        return np.linspace(self.lo, self.hi, self.bin_count + 1)

    def bin_index(self, value: float) -> int:
        span = self.hi - self.lo
        if span <= 0:
            return 0
        # multiply first so a value on boundary k lands in bin k
        idx = math.floor((float(value) - self.lo) * self.bin_count / span)
        return min(max(idx, 0), self.bin_count - 1)

    def __call__(self, value: float) -> str:
        return self.colors[self.bin_index(value)]

    def legend(self) -> List[LegendEntry]:
        edges = self.edges
        return [
            LegendEntry(lower=float(edges[i]), upper=float(edges[i + 1]), color=color)
            for i, color in enumerate(self.colors)
        ]


def spread_palette(palette: Sequence[str], bin_count: int) -> List[str]:
    """
    Pick `bin_count` colors from `palette`, spread evenly from first to last.

    :raises ValueError: if the palette is shorter than bin_count
    """
    if bin_count < 1:
        raise ValueError(f"bin_count must be at least 1, got {bin_count}")
    if len(palette) < bin_count:
        raise ValueError(
            f"Palette has {len(palette)} colors but {bin_count} bins were requested"
        )
    if bin_count == 1:
        return [palette[0]]
    idx = np.rint(np.linspace(0, len(palette) - 1, bin_count)).astype(int)
    return [palette[i] for i in idx]


def build_binner(
    palette: Sequence[str],
    values: Iterable[float],
    bin_count: int = DEFAULT_BIN_COUNT,
) -> ColorBinner:
    """
    Build a value -> color mapping over the observed range of `values`.

    NaNs are ignored. With no observed values the range collapses to [0, 0].
    """
    arr = np.asarray(list(values), dtype=float)
    arr = arr[~np.isnan(arr)]
    if arr.size == 0:
        lo = hi = 0.0
    else:
        lo, hi = float(arr.min()), float(arr.max())

    return ColorBinner(spread_palette(palette, bin_count), lo, hi)
