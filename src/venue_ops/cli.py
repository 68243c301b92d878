"""CLI entry point for venue operations."""

from __future__ import annotations

import sys
from datetime import datetime, timezone

import click

from .core.config import load_settings


def _parse_day(value: str) -> datetime:
    return datetime.strptime(value, "%Y-%m-%d").replace(tzinfo=timezone.utc)


def _report(result) -> None:
    """Echo OK or each failure message; exit 1 on failure."""
    if result.is_success:
        click.echo("OK")
        return
    for line in result.error.message.splitlines():
        click.echo(f"  - {line}")
    sys.exit(1)


@click.group()
@click.option("--config", default=None, help="TOML config file path")
@click.option("--log-level", default=None, help="Override log level")
@click.pass_context
def main(ctx: click.Context, config: str | None, log_level: str | None) -> None:
    """Venue operations toolkit."""
    from .observability.logger import new_session_id, setup_logging

    overrides: dict = {}
    if log_level:
        overrides["observability"] = {"log_level": log_level}
    settings = load_settings(config_path=config, overrides=overrides)
    setup_logging(
        level=settings.observability.log_level,
        format=settings.observability.log_format,
    )
    new_session_id()
    ctx.obj = settings


@main.command("validate-venue")
@click.argument("name")
@click.argument("location")
@click.argument("code")
@click.option("--email", default=None, help="Contact email")
@click.option("--phone", default=None, help="Contact phone")
def validate_venue(
    name: str, location: str, code: str, email: str | None, phone: str | None
) -> None:
    """Check venue details before creating a venue."""
    from .validation import validate_venue_input

    _report(validate_venue_input(name, location, code, email, phone))


@main.command("validate-time")
@click.argument("time")
def validate_time(time: str) -> None:
    """Check an event-type time such as '9:00 AM'."""
    from .validation import validate, validate_time_format

    _report(validate(validate_time_format(time)))


@main.command("donation-status")
@click.argument("found_date")
@click.option("--today", default=None, help="Reference date (YYYY-MM-DD), default now")
@click.pass_obj
def donation_status(settings, found_date: str, today: str | None) -> None:
    """Show the donation countdown for an item found on FOUND_DATE."""
    from .core.clock import FixedClock, WallClock
    from .core.models import LostItem
    from .lifecycle import lost_items

    clock = FixedClock(_parse_day(today)) if today else WallClock()
    hold_days = settings.lost_and_found.donation_hold_days
    item = LostItem(venue_id="-", description="-", found_date=_parse_day(found_date))

    click.echo(f"  Days since found:    {lost_items.days_since_found(item, clock)}")
    click.echo(
        f"  Days until donation: "
        f"{lost_items.days_until_donation(item, clock, hold_days)}"
    )
    eligible = lost_items.can_be_donated(item, clock, hold_days)
    click.echo(f"  Can be donated:      {'YES' if eligible else 'No'}")


@main.command("tally-demo")
@click.pass_obj
def tally_demo(settings) -> None:
    """Run a short counting session against an in-memory store."""
    from .services import CountingService, SetupService
    from .storage.memory_store import InMemoryStore

    store = InMemoryStore()
    setup = SetupService(store)
    venue = setup.create_venue("Demo Hall", "Main Street", "DEMO").unwrap()
    for name, capacity in (("Main Floor", 500), ("Balcony", 100), ("Lobby", 150)):
        setup.add_area(venue.id, name, capacity).unwrap()

    engine = CountingService(store, settings=settings).start_event(
        venue.id, "Demo"
    ).unwrap()
    main_floor, balcony, _ = engine.area_counts

    for _ in range(5):
        engine.increment(main_floor.id).unwrap()
    for _ in range(2):
        engine.increment(balcony.id).unwrap()
    _echo_totals("after counting", engine)

    for _ in range(3):
        engine.undo().unwrap()
    _echo_totals("after three undos", engine)

    engine.lock().unwrap()
    click.echo(f"\n{'=' * 40}")
    for ac in engine.area_counts:
        click.echo(f"  {ac.area_name:15s} {ac.count:>5d} / {ac.capacity:<5d} history={ac.history}")
    click.echo(f"{'=' * 40}")


def _echo_totals(label: str, engine) -> None:
    click.echo(
        f"  {label:18s} attendance={engine.total_attendance} "
        f"capacity={engine.total_capacity} undo={engine.can_undo} redo={engine.can_redo}"
    )


if __name__ == "__main__":
    main()
