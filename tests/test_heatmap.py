"""
Tests for the temperature x pH heatmap grid.
"""

import pytest

from ammoniaguard.heatmap import HeatmapCell, generate_heatmap_data, heatmap_summary
from ammoniaguard.risk_engine import AmmoniaPipeline, ModelParameters, RiskTier, predict_ammonia_risk


class TestGridShape:

    @pytest.mark.parametrize("steps", [2, 5, 8])
    def test_square_grid(self, steps):
        grid = generate_heatmap_data((5, 40), (5.0, 10.0), 1200, steps)
        assert len(grid) == steps
        assert all(len(row) == steps for row in grid)

    def test_corners(self):
        grid = generate_heatmap_data((20, 35), (6.5, 9.0), 1500, 6)
        first, last = grid[0][0], grid[-1][-1]
        assert (first.temperature, first.ph) == (20, 6.5)
        assert last.temperature == 35
        assert last.ph == 9.0

    def test_row_major_temperature_then_ph(self):
        grid = generate_heatmap_data((10, 30), (6.0, 8.0), 800, 3)
        assert [row[0].temperature for row in grid] == pytest.approx([10, 20, 30])
        assert [cell.ph for cell in grid[0]] == pytest.approx([6.0, 7.0, 8.0])
        assert all(cell.temperature == grid[1][0].temperature for cell in grid[1])

    def test_single_step_sits_at_low_end(self):
        grid = generate_heatmap_data((12, 30), (6.5, 9.0), 1000, 1)
        assert len(grid) == 1 and len(grid[0]) == 1
        cell = grid[0][0]
        assert (cell.temperature, cell.ph) == (12, 6.5)
        assert cell.result == predict_ammonia_risk(12, 6.5, 1000)

    def test_zero_steps_rejected(self):
        with pytest.raises(ValueError):
            generate_heatmap_data((5, 40), (5, 10), 1200, 0)


class TestGridValues:

    def test_cells_match_pipeline(self):
        grid = generate_heatmap_data((25, 38), (7.0, 9.5), 2900, 4)
        for row in grid:
            for cell in row:
                assert cell.result == predict_ammonia_risk(cell.temperature, cell.ph, 2900)

    def test_parallel_matches_serial(self):
        serial = generate_heatmap_data((5, 40), (5.0, 10.0), 2500, 10)
        parallel = generate_heatmap_data((5, 40), (5.0, 10.0), 2500, 10, workers=4)
        assert parallel == serial

    def test_custom_pipeline(self):
        pipeline = AmmoniaPipeline(ModelParameters(intercept=3.0))
        grid = generate_heatmap_data((28, 28), (7.5, 7.5), 1200, 2, pipeline=pipeline)
        assert grid[0][0].result.tan_mg_l > 0.0

    def test_cell_as_dict(self):
        cell = generate_heatmap_data((38, 38), (9.5, 9.5), 2900, 1)[0][0]
        d = cell.as_dict()
        assert set(d) == {"temperature", "pH", "TAN", "toxicNH3", "risk"}
        assert d["risk"] == "CRITICAL"


class TestSummary:

    def test_counts_and_peak(self):
        grid = generate_heatmap_data((5, 40), (5.0, 10.0), 2900, 8)
        summary = heatmap_summary(grid)
        assert summary["cells"] == 64
        assert summary["safe_cells"] + summary["warning_cells"] + summary["critical_cells"] == 64
        peak = max((c for row in grid for c in row), key=lambda c: c.result.toxic_nh3_mg_l)
        assert summary["peak"] == peak.as_dict()

    def test_hot_alkaline_corner_is_critical(self):
        grid = generate_heatmap_data((5, 38), (5.0, 9.5), 2900, 5)
        assert grid[-1][-1].result.risk is RiskTier.CRITICAL
        assert heatmap_summary(grid)["critical_cells"] >= 1

    def test_empty_grid(self):
        assert heatmap_summary([])["peak"] is None

    def test_handles_plain_cells(self):
        r = predict_ammonia_risk(28, 7.5, 1200)
        summary = heatmap_summary([[HeatmapCell(28, 7.5, r)]])
        assert summary["safe_cells"] == 1


class TestAxisEndpoints:

    @pytest.mark.parametrize("t_range,ph_range,steps", [
        ((20.3, 37.9), (6.1, 9.7), 34),
        ((0.1, 0.7), (0.1, 0.7), 38),
        ((5, 40), (5.0, 10.0), 7),
    ])
    def test_last_cell_lands_on_range_end(self, t_range, ph_range, steps):
        grid = generate_heatmap_data(t_range, ph_range, 1200, steps)
        assert grid[-1][-1].temperature == t_range[1]
        assert grid[-1][-1].ph == ph_range[1]
        assert grid[0][0].temperature == t_range[0]
        assert grid[0][0].ph == ph_range[0]
