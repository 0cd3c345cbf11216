"""Tests for home-state classification and continue-recording candidates."""

from __future__ import annotations

from datetime import date, datetime, timedelta

from lifelab.analytics.day_state import CONTINUE_TITLES, classify_day
from lifelab.models.analytics import HomeState


class TestClassifyDay:
    def test_empty_snapshot(self, today):
        state = classify_day([], today)
        assert state.state == HomeState.NO_ACTIVE
        assert not state.has_updated_today
        assert state.continue_candidates == []
        assert state.continue_preview == []
        assert state.continue_title == CONTINUE_TITLES[HomeState.NO_ACTIVE]

    def test_only_completed_records_is_no_active(self, make_record, today):
        done = make_record(created=date(2025, 12, 1), completed=today)
        state = classify_day([done], today)
        assert state.state == HomeState.NO_ACTIVE
        assert state.has_updated_today

    def test_created_today_is_updated_today(self, make_record, today):
        state = classify_day([make_record(created=today)], today)
        assert state.state == HomeState.UPDATED_TODAY
        assert state.continue_candidates == []

    def test_active_without_update(self, make_record, today):
        rec = make_record(created=today - timedelta(days=3))
        state = classify_day([rec], today)
        assert state.state == HomeState.ACTIVE_NO_UPDATE_TODAY
        assert state.continue_candidates == [rec]
        assert state.continue_title == "Continue Recording"

    def test_completion_today_counts_as_update(self, make_record, today):
        waiting = make_record("Waiting", created=today - timedelta(days=3))
        done = make_record("Done", created=today - timedelta(days=9), completed=today)
        state = classify_day([waiting, done], today)
        assert state.state == HomeState.UPDATED_TODAY
        assert state.continue_candidates == [waiting]
        assert state.continue_title == CONTINUE_TITLES[HomeState.UPDATED_TODAY]

    def test_candidates_sorted_by_updated_desc(self, make_record, today):
        a = make_record("A", created=date(2025, 12, 1), updated=date(2025, 12, 20))
        b = make_record("B", created=date(2025, 12, 1), updated=date(2026, 1, 3))
        c = make_record("C", created=date(2025, 12, 1), updated=date(2025, 12, 28))
        state = classify_day([a, b, c], today)
        assert [r.title for r in state.continue_candidates] == ["B", "C", "A"]
        assert [r.title for r in state.continue_preview] == ["B", "C"]

    def test_candidate_ties_keep_snapshot_order(self, make_record, today):
        same = date(2026, 1, 2)
        records = [make_record(t, created=date(2025, 12, 1), updated=same) for t in "XYZ"]
        state = classify_day(records, today)
        assert [r.title for r in state.continue_candidates] == ["X", "Y", "Z"]

    def test_touched_records_excluded_from_candidates(self, make_record, today):
        logged = make_record("Logged", created=date(2025, 12, 1), logs=[today])
        idle = make_record("Idle", created=date(2025, 12, 1))
        state = classify_day([logged, idle], today)
        assert [r.title for r in state.continue_candidates] == ["Idle"]
        assert [r.title for r in state.active_records] == ["Logged", "Idle"]

    def test_today_normalized_from_datetime(self, make_record, today):
        rec = make_record(created=today)
        state = classify_day([rec], datetime(2026, 1, 5, 23, 59, 59))
        assert state.today == today
        assert state.state == HomeState.UPDATED_TODAY

    def test_title_depends_only_on_state(self, make_record, today):
        one = classify_day([make_record("One", created=date(2025, 12, 1))], today)
        two = classify_day(
            [make_record(t, created=date(2025, 12, 1)) for t in ("A", "B", "C")], today
        )
        assert one.continue_title == two.continue_title
