"""Tests for the month calendar grid."""

from __future__ import annotations

import datetime as dt

from shift_planner.models.roster import DepartmentName
from shift_planner.views.month_grid import calendar_grid, day_label, month_days, shift_month


class TestMonthHelpers:
    def test_month_days(self):
        assert len(month_days(2024, 2)) == 29
        assert month_days(2024, 6)[0] == dt.date(2024, 6, 1)
        assert month_days(2024, 6)[-1] == dt.date(2024, 6, 30)

    def test_shift_month(self):
        assert shift_month(dt.date(2024, 12, 15), 1) == dt.date(2025, 1, 1)
        assert shift_month(dt.date(2024, 1, 31), -1) == dt.date(2023, 12, 1)
        assert shift_month(dt.date(2024, 6, 10), 0) == dt.date(2024, 6, 1)

    def test_day_label(self):
        assert day_label(dt.date(2024, 6, 1)) == "1 Sat"


class TestCalendarGrid:
    def test_grid_layout(self, store):
        grid = calendar_grid(
            store.shifts, store.machines, store.workers, DepartmentName.PLASTICA, 2024, 6
        )
        assert list(grid.index) == ["Iniezione 1", "Iniezione 2", "Soffiaggio 1"]
        assert grid.shape == (3, 30)

    def test_grid_cells(self, store):
        grid = calendar_grid(
            store.shifts, store.machines, store.workers, DepartmentName.PLASTICA, 2024, 6
        )
        assert grid.loc["Iniezione 1", "1 Sat"] == "Mario Rossi (Mattina)"
        assert grid.loc["Soffiaggio 1", "1 Sat"] == "Luigi Verdi (Pomeriggio)"
        assert grid.loc["Iniezione 2", "1 Sat"] == ""
        assert grid.loc["Iniezione 1", "20 Thu"] == ""

    def test_multiple_shifts_in_one_cell(self, store):
        store.add_shift("2024-06-01", "m1", "w4", "notte")
        grid = calendar_grid(
            store.shifts, store.machines, store.workers, DepartmentName.PLASTICA, 2024, 6
        )
        assert grid.loc["Iniezione 1", "1 Sat"] == "Mario Rossi (Mattina)\nPaola Neri (Notte)"

    def test_other_month_is_empty(self, store):
        grid = calendar_grid(
            store.shifts, store.machines, store.workers, DepartmentName.SERIGRAFIA, 2024, 7
        )
        assert list(grid.index) == ["Serigrafia 1"]
        assert (grid == "").all().all()
