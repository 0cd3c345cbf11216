"""Click CLI entry point for lifelab."""

from __future__ import annotations

import sys
from datetime import date, datetime
from typing import NoReturn

import click

from lifelab.analytics import build_home, group_by_category, week_cells
from lifelab.analytics.calendar import build_week_window
from lifelab.catalog import CatalogError, load_catalog
from lifelab.config import Settings
from lifelab.db import Database
from lifelab.lifecycle import (
    LifecycleError,
    complete_record,
    create_record,
    lock_review,
    reopen_record,
    save_log,
    update_review,
)
from lifelab.logging import configure_logging
from lifelab.models.experiment import ExperimentRecord, ExperimentStatus, Mood

DAY = click.DateTime(formats=["%Y-%m-%d"])


def _get_db(settings: Settings) -> Database:
    settings.ensure_data_dir()
    db = Database(settings.db_path)
    db.init_schema()
    return db


def _now(settings: Settings) -> datetime:
    return datetime.now(settings.tzinfo).astimezone(settings.tzinfo)


def _today(settings: Settings, override: datetime | None) -> date:
    return override.date() if override else _now(settings).date()


def _load_record(db: Database, record_id: str) -> ExperimentRecord:
    record = db.get_record(record_id)
    if record is None:
        click.echo(f"Experiment {record_id} not found.", err=True)
        sys.exit(1)
    return record


def _fail(exc: Exception) -> NoReturn:
    click.echo(f"Error: {exc}", err=True)
    sys.exit(1)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """lifelab — run small experiments on your life, one day at a time."""
    ctx.ensure_object(dict)
    settings = ctx.obj.get("settings") or Settings()
    log_level = "DEBUG" if verbose else settings.log_level
    configure_logging(log_level=log_level, log_format=settings.log_format)
    ctx.obj["settings"] = settings


@cli.command()
@click.argument("title")
@click.option("--category", type=str, default=None, help="Catalog or custom category")
@click.option("--subcategory", type=str, default=None)
@click.pass_context
def new(ctx: click.Context, title: str, category: str | None, subcategory: str | None) -> None:
    """Start a new experiment."""
    settings = ctx.obj["settings"]
    db = _get_db(settings)
    try:
        try:
            record = create_record(title, _now(settings), category, subcategory)
        except ValueError as exc:
            _fail(exc)
        db.save_record(record)
        click.echo(f"Created experiment {record.id}: {record.title}")
    finally:
        db.close()


@cli.command()
@click.argument("record_id")
@click.option("--note", type=str, default="", help="What happened today")
@click.option(
    "--mood",
    type=click.Choice([m.value for m in Mood], case_sensitive=False),
    default=None,
)
@click.option("--day", type=DAY, default=None, help="Day to log (YYYY-MM-DD); default today")
@click.pass_context
def log(
    ctx: click.Context, record_id: str, note: str, mood: str | None, day: datetime | None
) -> None:
    """Write (or overwrite) the daily log for an experiment."""
    settings = ctx.obj["settings"]
    db = _get_db(settings)
    try:
        record = _load_record(db, record_id)
        log_day = _today(settings, day)
        try:
            record = save_log(
                record,
                log_day,
                _now(settings),
                note=note,
                mood=Mood(mood) if mood else None,
                tz=settings.tzinfo,
            )
        except LifecycleError as exc:
            _fail(exc)
        db.save_record(record)
        click.echo(f"Logged {log_day.isoformat()} for {record.title}")
    finally:
        db.close()


@cli.command()
@click.argument("record_id")
@click.pass_context
def complete(ctx: click.Context, record_id: str) -> None:
    """Mark an experiment completed."""
    settings = ctx.obj["settings"]
    db = _get_db(settings)
    try:
        record = _load_record(db, record_id)
        try:
            record = complete_record(record, _now(settings), review=record.review)
        except LifecycleError as exc:
            _fail(exc)
        db.save_record(record)
        click.echo(f"Experiment {record_id} completed.")
    finally:
        db.close()


@cli.command()
@click.argument("record_id")
@click.pass_context
def reopen(ctx: click.Context, record_id: str) -> None:
    """Reopen a completed experiment."""
    settings = ctx.obj["settings"]
    db = _get_db(settings)
    try:
        record = reopen_record(_load_record(db, record_id), _now(settings))
        db.save_record(record)
        click.echo(f"Experiment {record_id} reopened.")
    finally:
        db.close()


@cli.command()
@click.argument("record_id")
@click.option("--happened", type=str, default="", help="What happened")
@click.option("--learned", type=str, default="", help="What you learned")
@click.option("--next", "next_step", type=str, default="", help="What comes next")
@click.option("--lock", is_flag=True, help="Lock the review after saving")
@click.pass_context
def review(
    ctx: click.Context,
    record_id: str,
    happened: str,
    learned: str,
    next_step: str,
    lock: bool,
) -> None:
    """Write the review for an experiment."""
    settings = ctx.obj["settings"]
    db = _get_db(settings)
    try:
        record = _load_record(db, record_id)
        now = _now(settings)
        try:
            record = update_review(record, (happened, learned, next_step), now)
        except LifecycleError as exc:
            _fail(exc)
        if lock:
            record = lock_review(record, now)
        db.save_record(record)
        click.echo(f"Review saved for {record.title}" + (" (locked)" if lock else ""))
    finally:
        db.close()


@cli.command("rm")
@click.argument("record_id")
@click.pass_context
def remove(ctx: click.Context, record_id: str) -> None:
    """Delete an experiment and all of its logs."""
    settings = ctx.obj["settings"]
    db = _get_db(settings)
    try:
        if not db.delete_record(record_id):
            click.echo(f"Experiment {record_id} not found.", err=True)
            sys.exit(1)
        click.echo(f"Experiment {record_id} deleted.")
    finally:
        db.close()


@cli.command("ls")
@click.option(
    "--status",
    type=click.Choice([s.value for s in ExperimentStatus], case_sensitive=False),
    default=None,
    help="Filter by status",
)
@click.pass_context
def list_experiments(ctx: click.Context, status: str | None) -> None:
    """List experiments."""
    settings = ctx.obj["settings"]
    db = _get_db(settings)
    try:
        records = db.list_records(ExperimentStatus(status) if status else None)
        if not records:
            click.echo("No experiments found.")
            return
        for r in records:
            category = f" [{r.trimmed_category}]" if r.trimmed_category else ""
            click.echo(f"  {r.id}  {r.status.value:<9}  {r.title}{category}  ({len(r.logs)} logs)")
    finally:
        db.close()


@cli.command()
@click.option("--today", "today_override", type=DAY, default=None, help="Pretend today is DATE")
@click.pass_context
def home(ctx: click.Context, today_override: datetime | None) -> None:
    """Show today's state, streak, recent events and category boxes."""
    settings = ctx.obj["settings"]
    try:
        catalog = load_catalog(settings.catalog_path)
    except CatalogError as exc:
        _fail(exc)
    db = _get_db(settings)
    try:
        summary = build_home(
            db.snapshot(), _today(settings, today_override), catalog, tz=settings.tzinfo
        )
    finally:
        db.close()

    click.echo(f"Today: {summary.today.isoformat()}  ({summary.day_state.state.value})")
    click.echo(f"Streak: {summary.streak} day{'s' if summary.streak != 1 else ''}")

    click.echo("\nRecent Events")
    for event in summary.events:
        suffix = f": {event.subtitle}" if event.subtitle else ""
        click.echo(f"  * {event.title}{suffix}")

    click.echo(f"\n{summary.day_state.continue_title}")
    preview = summary.day_state.continue_preview
    if not preview:
        click.echo("  (nothing waiting)")
    for r in preview:
        click.echo(f"  {r.id}  {r.title}")

    click.echo("\nCategories")
    for box in summary.category_boxes:
        click.echo(f"  {box.title}: {len(box.records)}")


@cli.command()
@click.option("--today", "today_override", type=DAY, default=None, help="Pretend today is DATE")
@click.option("--offset", type=int, default=0, help="Weeks to move from today's week (+/-)")
@click.pass_context
def calendar(ctx: click.Context, today_override: datetime | None, offset: int) -> None:
    """Show one week of activity."""
    settings = ctx.obj["settings"]
    db = _get_db(settings)
    try:
        records = db.snapshot()
    finally:
        db.close()

    today = _today(settings, today_override)
    window = build_week_window(records, today, settings.tzinfo)
    for _ in range(abs(offset)):
        window = window.next() if offset > 0 else window.previous()

    click.echo(f"Week of {window.monday.isoformat()}  [{window.min_offset}..{window.max_offset}]")
    for cell in week_cells(records, window, today, settings.tzinfo):
        dots = "●" * cell.dots + ("+" if cell.overflow else "")
        marker = " <- today" if cell.is_today else ""
        click.echo(f"  {cell.day.strftime('%a %d')}  {dots:<6} {cell.count}{marker}")


@cli.command()
@click.pass_context
def categories(ctx: click.Context) -> None:
    """Show experiments grouped by category."""
    settings = ctx.obj["settings"]
    try:
        catalog = load_catalog(settings.catalog_path)
    except CatalogError as exc:
        _fail(exc)
    db = _get_db(settings)
    try:
        boxes = group_by_category(db.snapshot(), catalog)
    finally:
        db.close()

    for box in boxes:
        names = f" ({', '.join(box.custom_category_names)})" if box.custom_category_names else ""
        click.echo(f"{box.title}{names}: {len(box.records)}")
        for r in box.records:
            click.echo(f"  {r.id}  {r.title}")
