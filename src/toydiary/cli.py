"""Toy Diary CLI - local journal."""

import json
import logging
import sys
from datetime import date

import click

from .config import load_config
from .core.entries import Entry, Mood
from .core.stats import format_timestamp
from .store import EntryStore
from .workflows import open_session, open_store

MOOD_CHOICES = click.Choice([m.value for m in Mood], case_sensitive=False)


def _validate_date(ctx, param, value: str | None) -> str | None:
    """Accept YYYY-MM-DD only."""
    if not value:
        return value
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError:
        raise click.BadParameter(f"'{value}' is not a date (expected YYYY-MM-DD)")


def _warn_if_unsaved(store: EntryStore) -> None:
    if store.save_warning:
        click.echo(f"Warning: {store.save_warning}", err=True)


def _entry_json(entry: Entry) -> dict:
    return entry.to_dict() | {"moodLabel": entry.mood_label}


def _show_entries(entries: list[Entry], as_json: bool, empty_msg: str) -> None:
    """Shared entry display logic."""
    if as_json:
        click.echo(json.dumps([_entry_json(e) for e in entries], indent=2, ensure_ascii=False))
        return

    click.echo(f"{len(entries)} shown")
    if not entries:
        click.echo(empty_msg)
        return

    for entry in entries:
        click.echo()
        click.echo(f"{entry.date}  {entry.mood_label}  [{entry.id}]")
        click.echo(f"  {entry.display_title}")
        click.echo(f"  {entry.display_content}")
        click.echo(f"  Updated • {format_timestamp(entry.updated_at)}")


@click.group()
@click.version_option(package_name="toydiary")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """Toy Diary - capture the pulse of your day."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


@main.command()
@click.option("--date", "-d", "entry_date", default=None, callback=_validate_date,
              help="Entry date (YYYY-MM-DD), defaults to today")
@click.option("--mood", "-m", type=MOOD_CHOICES, default=None, help="Mood tag")
@click.option("--title", "-t", default=None, help="Entry title")
@click.option("--content", "-c", default=None, help="Entry notes")
def add(entry_date: str | None, mood: str | None, title: str | None, content: str | None):
    """Write a new entry."""
    config = load_config()
    session = open_session(config)

    if title is None and content is None:
        title = click.prompt("Title", default="", show_default=False).strip()
        content = click.prompt("Notes", default="", show_default=False).strip()

    session.change(
        date=entry_date,
        mood=mood.lower() if mood else None,
        title=title,
        content=content,
    )
    entry = session.submit()
    if entry is None:
        click.echo("Nothing to save: add a title or some notes.", err=True)
        sys.exit(1)

    click.echo(f"✓ Saved entry {entry.id}")
    _warn_if_unsaved(session.store)


@main.command()
@click.argument("entry_id")
@click.option("--date", "-d", "entry_date", default=None, callback=_validate_date,
              help="New entry date (YYYY-MM-DD)")
@click.option("--mood", "-m", type=MOOD_CHOICES, default=None, help="New mood tag")
@click.option("--title", "-t", default=None, help="New title")
@click.option("--content", "-c", default=None, help="New notes")
def edit(entry_id: str, entry_date: str | None, mood: str | None, title: str | None, content: str | None):
    """Edit an existing entry."""
    config = load_config()
    session = open_session(config)

    entry = session.store.get(entry_id)
    if entry is None:
        click.echo(f"Error: no entry with id {entry_id}", err=True)
        sys.exit(1)

    session.begin_edit(entry)
    session.change(
        date=entry_date,
        mood=mood.lower() if mood else None,
        title=title,
        content=content,
    )
    updated = session.submit()
    click.echo(f"✓ Updated entry {updated.id}")
    _warn_if_unsaved(session.store)


@main.command()
@click.argument("entry_id")
def delete(entry_id: str):
    """Delete an entry."""
    config = load_config()
    session = open_session(config)

    if session.delete(entry_id):
        click.echo(f"✓ Deleted entry {entry_id}")
    else:
        click.echo(f"No entry with id {entry_id}.")
    _warn_if_unsaved(session.store)


@main.command("list")
@click.option("--search", "-s", default="", help="Search title or content")
@click.option("--date", "-d", "filter_date", default="", callback=_validate_date,
              help="Only entries on this date (YYYY-MM-DD)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_entries(search: str, filter_date: str, as_json: bool):
    """List recent entries."""
    config = load_config()
    store = open_store(config)
    entries = store.filtered_view(search, filter_date or "")

    empty_msg = "No entries yet. Write your first note with 'diary add'."
    if len(store) and (search.strip() or filter_date):
        empty_msg = "No entries match."
    _show_entries(entries, as_json, empty_msg)


@main.command()
@click.argument("entry_id")
def show(entry_id: str):
    """Show a single entry."""
    config = load_config()
    store = open_store(config)

    entry = store.get(entry_id)
    if entry is None:
        click.echo(f"Error: no entry with id {entry_id}", err=True)
        sys.exit(1)

    click.echo(f"{entry.date}  {entry.mood_label}")
    click.echo(f"# {entry.display_title}\n")
    click.echo(entry.display_content)
    click.echo(f"\nUpdated • {format_timestamp(entry.updated_at)}")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def stats(as_json: bool):
    """Show entry totals and mood mix."""
    config = load_config()
    summary = open_store(config).stats()

    if as_json:
        click.echo(
            json.dumps(
                {
                    "total": summary.total,
                    "last_updated": summary.last_updated,
                    "moods": {m.value: n for m, n in summary.mood_counts.items()},
                },
                indent=2,
            )
        )
        return

    click.echo(f"Total entries: {summary.total}")
    click.echo(f"Last saved:    {format_timestamp(summary.last_updated)}")
    click.echo(f"Mood mix:      {summary.mood_mix()}")


if __name__ == "__main__":
    main()
