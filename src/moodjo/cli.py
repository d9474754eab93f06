"""MoodJo CLI - Mood Journal."""

import json
import logging
import sys
from datetime import date
from pathlib import Path

import click

from .adapters.file_media import FileMediaStore
from .config import Config, load_config
from .core.emotions import Energy, Hue, Valence, emotion, find_by_name
from .core.entries import JournalEntry
from .core.mood import decode, decode_mood, encode
from .manager import DuplicateEntryError, JournalManager
from .ports.entry_store import StoreError
from .workflows import (
    can_save,
    get_manager,
    save_entry_changes,
    save_new_entry,
)


@click.group()
@click.version_option(package_name="moodjo")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """MoodJo - one journal entry per day, with a mood."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


def _parse_date(value: str | None) -> date:
    if not value:
        return date.today()
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"Expected YYYY-MM-DD, got {value!r}", param_hint="--date")


def _resolve_mood(value: str | None) -> str | None:
    """Accept a stored mood string or an emotion name; return the canonical form."""
    if not value:
        return None

    point = decode(value)
    if point is None:
        matches = find_by_name(value)
        if len(matches) == 1:
            point = matches[0]
        elif len(matches) > 1:
            options = ", ".join(encode(p) for p in matches)
            raise click.BadParameter(
                f"{value!r} appears more than once in the grid; use one of: {options}",
                param_hint="--mood",
            )
        else:
            raise click.BadParameter(f"Unknown mood {value!r}", param_hint="--mood")
    return encode(point)


def _read_files(paths: tuple[str, ...]) -> list[bytes]:
    return [Path(p).read_bytes() for p in paths]


def _open(config: Config) -> tuple[JournalManager, FileMediaStore]:
    manager = get_manager(config)
    return manager, manager.media


def _require_entry(manager: JournalManager, target: date, config: Config) -> JournalEntry:
    entry = manager.entry_for_day(target)
    if entry is None:
        click.echo(f"No journal entry for {target.strftime(config.date_format)}.", err=True)
        sys.exit(1)
    return entry


def _entry_json(entry: JournalEntry) -> dict:
    data = entry.to_dict()
    decoded = decode_mood(entry.mood_value)
    data["mood"] = (
        {
            "name": decoded.point.name,
            "color": decoded.point.color.hex,
            "source": decoded.source.value,
        }
        if decoded
        else None
    )
    return data


def _entry_line(entry: JournalEntry) -> str:
    star = "*" if entry.is_favorite else " "
    mood = entry.mood
    mood_str = f" [{mood.name}]" if mood else ""
    if entry.title:
        heading = entry.title
    else:
        lines = entry.text.strip().splitlines()
        heading = lines[0] if lines else ""
    tags = f"  #{' #'.join(entry.tags)}" if entry.tags else ""
    return f"{star} {entry.day.isoformat()}{mood_str} {heading}{tags}".rstrip()


@main.command()
@click.option("--date", "-d", "target_date", default=None,
              help="Day of the entry (YYYY-MM-DD), defaults to today")
@click.option("--title", "-t", default=None, help="Optional title")
@click.option("--text", default=None, help="Entry text (prompted if omitted)")
@click.option("--mood", "-m", default=None, help="Emotion name or Hue|energy|valence")
@click.option("--tag", "tags", multiple=True, help="Tag (repeatable)")
@click.option("--image", "images", multiple=True, type=click.Path(exists=True, dir_okay=False),
              help="Image file to attach (repeatable)")
@click.option("--audio", default=None, type=click.Path(exists=True, dir_okay=False),
              help="Audio file to attach")
def new(target_date, title, text, mood, tags, images, audio):
    """Write the entry for a day."""
    config = load_config()
    target = _parse_date(target_date)
    mood_value = _resolve_mood(mood)

    if text is None:
        text = click.prompt("Text", default="", show_default=False)
    if not can_save(text):
        click.echo("Error: entry text cannot be empty", err=True)
        sys.exit(1)

    manager, media = _open(config)
    try:
        entry = save_new_entry(
            manager,
            media,
            target,
            text=text,
            title=title,
            images=_read_files(images),
            audio=Path(audio).read_bytes() if audio else None,
            mood_value=mood_value,
            tags=tags,
            config=config,
        )
    except DuplicateEntryError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except (StoreError, OSError, ValueError) as e:
        click.echo(f"Error: Failed to save entry: {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ Saved entry for {entry.day.strftime(config.date_format)}")


@main.command()
@click.option("--date", "-d", "target_date", default=None,
              help="Day of the entry (YYYY-MM-DD), defaults to today")
@click.option("--title", "-t", default=None, help="New title (empty string clears it)")
@click.option("--text", default=None, help="New entry text")
@click.option("--mood", "-m", default=None, help="Emotion name or Hue|energy|valence")
@click.option("--clear-mood", is_flag=True, help="Remove the mood")
@click.option("--tag", "tags", multiple=True, help="Replace tags (repeatable)")
@click.option("--clear-tags", is_flag=True, help="Remove all tags")
@click.option("--add-image", "add_images", multiple=True,
              type=click.Path(exists=True, dir_okay=False), help="Image to attach (repeatable)")
@click.option("--remove-image", "remove_images", multiple=True,
              help="Attached image filename to remove (repeatable)")
@click.option("--audio", default=None, type=click.Path(exists=True, dir_okay=False),
              help="Replace the audio recording")
@click.option("--remove-audio", is_flag=True, help="Remove the audio recording")
def edit(target_date, title, text, mood, clear_mood, tags, clear_tags, add_images,
         remove_images, audio, remove_audio):
    """Edit the entry for a day. Unspecified fields are kept."""
    config = load_config()
    target = _parse_date(target_date)
    manager, media = _open(config)
    entry = _require_entry(manager, target, config)

    new_text = entry.text if text is None else text
    if not can_save(new_text):
        click.echo("Error: entry text cannot be empty", err=True)
        sys.exit(1)

    if clear_mood:
        mood_value = None
    elif mood:
        mood_value = _resolve_mood(mood)
    else:
        mood_value = entry.mood_value

    if clear_tags:
        new_tags = ()
    elif tags:
        new_tags = tags
    else:
        new_tags = entry.tags

    try:
        save_entry_changes(
            manager,
            media,
            entry,
            text=new_text,
            title=entry.title if title is None else title,
            keep_images=[p for p in entry.image_paths if p not in remove_images],
            new_images=_read_files(add_images),
            audio=Path(audio).read_bytes() if audio else None,
            remove_audio=remove_audio,
            mood_value=mood_value,
            tags=new_tags,
            config=config,
        )
    except (StoreError, OSError, ValueError) as e:
        click.echo(f"Error: Failed to save entry: {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ Updated entry for {entry.day.strftime(config.date_format)}")


@main.command()
@click.option("--date", "-d", "target_date", default=None,
              help="Day to view (YYYY-MM-DD), defaults to today")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def show(target_date, as_json: bool):
    """View the entry for a day."""
    config = load_config()
    target = _parse_date(target_date)
    manager, _ = _open(config)

    entry = manager.entry_for_day(target)
    if entry is None:
        click.echo(f"No journal entry for {target.strftime(config.date_format)}.")
        return

    if as_json:
        click.echo(json.dumps(_entry_json(entry), indent=2))
        return

    star = " ★" if entry.is_favorite else ""
    click.echo(f"{entry.day.strftime(config.date_format)}{star}")
    if entry.title:
        click.echo(f"# {entry.title}")

    decoded = decode_mood(entry.mood_value)
    if decoded:
        legacy = " (legacy)" if decoded.is_legacy else ""
        click.echo(f"Mood: {decoded.point}{legacy} {decoded.point.color.hex}")
    if entry.tags:
        click.echo(f"Tags: {', '.join(entry.tags)}")
    if entry.image_paths:
        click.echo(f"Images: {', '.join(entry.image_paths)}")
    if entry.audio_path:
        click.echo(f"Audio: {entry.audio_path}")
    click.echo()
    click.echo(entry.text.strip())


@main.command("list")
@click.option("--favorites", is_flag=True, help="Only favorite entries")
@click.option("--tag", default=None, help="Only entries with this tag")
@click.option("--search", "-s", default="", help="Case-insensitive text search")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_entries(favorites: bool, tag: str | None, search: str, as_json: bool):
    """List entries, newest first."""
    config = load_config()
    manager, _ = _open(config)
    entries = manager.filtered_view(favorites_only=favorites, tag=tag, search_text=search)

    if as_json:
        click.echo(json.dumps([_entry_json(e) for e in entries], indent=2))
        return

    if not entries:
        click.echo("No entries.")
        return

    for entry in entries:
        click.echo(_entry_line(entry))


@main.command()
@click.option("--date", "-d", "target_date", default=None,
              help="Day to delete (YYYY-MM-DD), defaults to today")
@click.option("--yes", "-y", is_flag=True, help="Don't ask for confirmation")
def delete(target_date, yes: bool):
    """Delete the entry for a day, with its images and audio."""
    config = load_config()
    target = _parse_date(target_date)
    manager, _ = _open(config)
    entry = _require_entry(manager, target, config)

    if not yes and not click.confirm(f"Delete entry for {target.strftime(config.date_format)}?"):
        return

    manager.delete(entry)
    if manager.exists_for_day(target):
        click.echo("Error: Failed to delete entry", err=True)
        sys.exit(1)
    click.echo("✓ Deleted")


@main.command()
@click.option("--date", "-d", "target_date", default=None,
              help="Day to toggle (YYYY-MM-DD), defaults to today")
def favorite(target_date):
    """Toggle the favorite flag on a day's entry."""
    config = load_config()
    target = _parse_date(target_date)
    manager, _ = _open(config)
    entry = _require_entry(manager, target, config)

    manager.toggle_favorite(entry)
    click.echo("★ Favorite" if entry.is_favorite else "☆ Not a favorite")


@main.command()
def tags():
    """List every tag in use."""
    config = load_config()
    manager, _ = _open(config)
    all_tags = manager.all_tags()
    if not all_tags:
        click.echo("No tags.")
        return
    for tag in all_tags:
        click.echo(tag)


@main.command()
@click.option("--hue", type=click.Choice([h.value for h in Hue], case_sensitive=False),
              default=None, help="Only show one hue")
def moods(hue: str | None):
    """Show the emotion grid."""
    hues = [h for h in Hue if hue is None or h.value.lower() == hue.lower()]
    for h in hues:
        click.echo(f"### {h.value}")
        for energy in reversed(Energy):
            cells = []
            for valence in Valence:
                name, color = emotion(h, energy, valence)
                cells.append(f"{name:12} {color.hex}")
            click.echo(f"  {energy.label:6}  " + "  ".join(cells))
        click.echo()


@main.command()
@click.argument("value")
def mood(value: str):
    """Decode a stored mood string (canonical or legacy #rrggbb)."""
    decoded = decode_mood(value)
    if decoded is None:
        click.echo("No mood recorded (unrecognized value).")
        return

    point = decoded.point
    click.echo(f"{point.name}")
    click.echo(f"  Hue:      {point.hue.value}")
    click.echo(f"  Energy:   {point.energy.label}")
    click.echo(f"  Valence:  {point.valence.label}")
    click.echo(f"  Color:    {point.color.hex}")
    click.echo(f"  Format:   {decoded.source.value}")
    if decoded.is_legacy:
        click.echo(f"  Canonical: {encode(point)}")


@main.command()
def cleanup():
    """Remove media files no entry references."""
    config = load_config()
    manager, _ = _open(config)
    try:
        removed = manager.cleanup_media()
    except StoreError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(f"Removed {removed} orphaned media file{'s' if removed != 1 else ''}.")


if __name__ == "__main__":
    main()
