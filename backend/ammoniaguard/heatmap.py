from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from .risk_engine import AmmoniaPipeline, PredictionResult, default_pipeline


@dataclass(frozen=True)
class HeatmapCell:
    temperature: float
    ph: float
    result: PredictionResult

    def as_dict(self) -> Dict[str, Any]:
        return {"temperature": self.temperature, "pH": self.ph, **self.result.as_dict()}


HeatmapGrid = List[List[HeatmapCell]]


def _axis(lo: float, hi: float, steps: int) -> List[float]:
    """
    Evenly spaced samples over [lo, hi], both ends included exactly.
    A single step sits at lo.
    """
    if steps == 1:
        return [lo]
    step = (hi - lo) / (steps - 1)
    return [lo + i * step for i in range(steps - 1)] + [hi]


def generate_heatmap_data(
    temperature_range: Sequence[float],
    ph_range: Sequence[float],
    conductivity: float,
    steps: int = 8,
    workers: Optional[int] = None,
    pipeline: Optional[AmmoniaPipeline] = None,
) -> HeatmapGrid:
    """
    Evaluate the pipeline over a temperature x pH grid at fixed conductivity.
    - rows follow temperature, columns follow pH
    - workers > 1 evaluates rows on a thread pool; row order is kept
    """
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")

    pipeline = pipeline or default_pipeline
    temps = _axis(temperature_range[0], temperature_range[1], steps)
    phs = _axis(ph_range[0], ph_range[1], steps)

    def build_row(t: float) -> List[HeatmapCell]:
        return [HeatmapCell(t, p, pipeline.predict(t, p, conductivity)) for p in phs]

    if workers and workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            # map() yields in submission order
            return list(pool.map(build_row, temps))

    return [build_row(t) for t in temps]


def heatmap_summary(grid: HeatmapGrid) -> Dict[str, Any]:
    counts = {"SAFE": 0, "WARNING": 0, "CRITICAL": 0}
    peak: Optional[HeatmapCell] = None

    for row in grid:
        for cell in row:
            counts[cell.result.risk.value] += 1
            if peak is None or cell.result.toxic_nh3_mg_l > peak.result.toxic_nh3_mg_l:
                peak = cell

    return {
        "cells": sum(counts.values()),
        "safe_cells": counts["SAFE"],
        "warning_cells": counts["WARNING"],
        "critical_cells": counts["CRITICAL"],
        "peak": peak.as_dict() if peak else None,
    }
