"""Tests for dashboard statistics."""

from __future__ import annotations

from shift_planner.models.config import StoreConfig
from shift_planner.store.domain_store import DomainStore
from shift_planner.views.dashboard import (
    dashboard_summary,
    hours_by_worker,
    shifts_by_department,
    shifts_by_machine,
    totals,
)


class TestDashboard:
    def test_totals(self, store):
        t = totals(store.shifts, store.workers, store.machines)
        assert (t.total_shifts, t.total_workers, t.total_machines) == (42, 4, 5)

    def test_shifts_by_department_skips_empty(self, store):
        df = shifts_by_department(store.shifts, store.departments)
        assert df.to_dict("records") == [
            {"name": "Plastica", "value": 28},
            {"name": "Serigrafia", "value": 14},
        ]

    def test_hours_by_worker(self, store):
        store.add_shift("2024-06-20", "m1", "w1", "notte")
        df = hours_by_worker(store.shifts, store.workers, 8)
        assert df.to_dict("records") == [
            {"name": "Mario Rossi", "hours": 120},
            {"name": "Luigi Verdi", "hours": 112},
            {"name": "Giovanni Bianchi", "hours": 112},
        ]

    def test_shifts_by_machine(self, store):
        store.update_shift("s1", "2024-06-01", "m2")
        df = shifts_by_machine(store.shifts, store.machines)
        assert df["name"].tolist() == ["Soffiaggio 1", "Serigrafia 1", "Iniezione 1", "Iniezione 2"]
        assert df["shifts"].tolist() == [14, 14, 13, 1]

    def test_empty_store(self, empty_store):
        summary = dashboard_summary(empty_store.snapshot())
        assert summary["totals"].total_shifts == 0
        assert summary["shifts_by_department"].empty
        assert summary["hours_by_worker"].empty
        assert summary["shifts_by_machine"].empty

    def test_summary_defaults_to_eight_hours(self, store):
        summary = dashboard_summary(store.snapshot())
        assert summary["hours_by_worker"]["hours"].tolist() == [112, 112, 112]

    def test_summary_follows_store_config(self, storage, clock):
        store = DomainStore(storage=storage, config=StoreConfig(hours_per_shift=6), clock=clock)
        summary = dashboard_summary(store.snapshot(), store.config)
        assert summary["hours_by_worker"]["hours"].tolist() == [84, 84, 84]
