"""Tests for the click CLI."""

from __future__ import annotations

import json
import re
from datetime import datetime, timedelta

import pytest
from click.testing import CliRunner

from lifelab.cli import cli
from lifelab.config import Settings
from lifelab.db import Database
from lifelab.lifecycle import create_record, save_log


@pytest.fixture()
def run(settings: Settings):
    runner = CliRunner()

    def _run(*args: str):
        return runner.invoke(cli, list(args), obj={"settings": settings})

    return _run


def _created_id(output: str) -> str:
    match = re.search(r"Created experiment (\w+):", output)
    assert match, output
    return match.group(1)


class TestRecordCommands:
    def test_new_and_ls(self, run):
        result = run("new", "Cold showers", "--category", "Health")
        assert result.exit_code == 0, result.output
        record_id = _created_id(result.stdout)

        listing = run("ls")
        assert listing.exit_code == 0
        assert record_id in listing.stdout
        assert "[Health]" in listing.stdout

    def test_ls_empty(self, run):
        result = run("ls")
        assert "No experiments found." in result.stdout

    def test_log_same_day_twice_keeps_one_entry(self, run, settings):
        record_id = _created_id(run("new", "Journal").stdout)
        assert run("log", record_id, "--note", "one", "--day", "2026-01-05").exit_code == 0
        result = run("log", record_id, "--note", "two", "--mood", "good", "--day", "2026-01-05")
        assert result.exit_code == 0, result.output

        db = Database(settings.db_path)
        try:
            record = db.get_record(record_id)
        finally:
            db.close()
        assert len(record.logs) == 1
        assert record.logs[0].note == "two"

    def test_complete_then_log_fails(self, run):
        record_id = _created_id(run("new", "Short one").stdout)
        assert run("complete", record_id).exit_code == 0
        result = run("log", record_id, "--note", "late")
        assert result.exit_code == 1
        assert "completed" in result.output

    def test_complete_twice_fails(self, run):
        record_id = _created_id(run("new", "Once").stdout)
        assert run("complete", record_id).exit_code == 0
        assert run("complete", record_id).exit_code == 1

    def test_reopen(self, run):
        record_id = _created_id(run("new", "Again").stdout)
        run("complete", record_id)
        result = run("reopen", record_id)
        assert result.exit_code == 0
        assert "active" in run("ls", "--status", "active").stdout

    def test_locked_review_rejects_edit(self, run):
        record_id = _created_id(run("new", "Reflect").stdout)
        assert run("review", record_id, "--happened", "a", "--lock").exit_code == 0
        result = run("review", record_id, "--happened", "b")
        assert result.exit_code == 1
        assert "locked" in result.output

    def test_unknown_id(self, run):
        result = run("complete", "nope")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_rm(self, run):
        record_id = _created_id(run("new", "Temporary").stdout)
        assert run("rm", record_id).exit_code == 0
        assert run("rm", record_id).exit_code == 1


class TestReportCommands:
    def test_home_empty(self, run):
        result = run("home", "--today", "2026-01-05")
        assert result.exit_code == 0, result.output
        assert "no_active" in result.stdout
        assert "You're here" in result.stdout
        assert "Start New Experiment" in result.stdout

    def test_home_after_logging(self, run, settings):
        settings.ensure_data_dir()
        db = Database(settings.db_path)
        db.init_schema()
        try:
            start = datetime(2026, 1, 2, 9, 0)
            rec = create_record("Walks", start)
            for offset in range(4):
                day = start + timedelta(days=offset)
                rec = save_log(rec, day.date(), day)
            db.save_record(rec)
        finally:
            db.close()

        result = run("home", "--today", "2026-01-05")
        assert result.exit_code == 0, result.output
        assert "Streak: 4 days" in result.stdout
        assert "4 days in a row" in result.stdout

    def test_calendar_navigation_is_clamped(self, run):
        run("new", "Anything")
        forward = run("calendar", "--offset", "3")
        today = run("calendar")
        assert forward.exit_code == 0, forward.output
        assert forward.stdout == today.stdout
        assert "<- today" in today.stdout

    def test_categories_with_catalog(self, run, settings, tmp_path):
        catalog = tmp_path / "catalog.json"
        catalog.write_text(json.dumps([{"id": "sleep", "title": "Sleep"}]), encoding="utf-8")
        settings.catalog_path = catalog
        run("new", "Nap", "--category", "Sleep")
        run("new", "Budget", "--category", "Finance")

        result = run("categories")
        assert result.exit_code == 0, result.output
        assert "Sleep: 1" in result.stdout
        assert "Custom (Finance): 1" in result.stdout
        assert "Uncategorized: 0" in result.stdout

    def test_home_uses_catalog_for_boxes(self, run, settings, tmp_path):
        catalog = tmp_path / "catalog.json"
        catalog.write_text(json.dumps([{"id": "sleep", "title": "Sleep"}]), encoding="utf-8")
        settings.catalog_path = catalog
        run("new", "Nap", "--category", "Sleep")

        result = run("home")
        assert result.exit_code == 0, result.output
        assert "  Sleep: 1" in result.stdout
        assert "  Custom: 0" in result.stdout

    def test_home_rejects_broken_catalog(self, run, settings, tmp_path):
        catalog = tmp_path / "catalog.json"
        catalog.write_text("{broken", encoding="utf-8")
        settings.catalog_path = catalog

        result = run("home")
        assert result.exit_code == 1
        assert "Invalid category catalog" in result.output
