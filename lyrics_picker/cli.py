from __future__ import annotations

import dataclasses
from pathlib import Path

import colorama
import typer

from lyrics_picker.batch import FilesProcessor
from lyrics_picker.config import load_config, save_config_value
from lyrics_picker.errors import NotFound
from lyrics_picker.genre.lastfm import LastFmGenreLookup
from lyrics_picker.logging_setup import setup_logging
from lyrics_picker.media.player import AudioPlayer
from lyrics_picker.picker.editor import ExternalEditor
from lyrics_picker.picker.picker import LyricsPicker
from lyrics_picker.render.ansi import PickerRenderer
from lyrics_picker.sources.http import HttpClient
from lyrics_picker.sources.service import LyricsService, build_sources
from lyrics_picker.sources.types import Song


app = typer.Typer(no_args_is_help=True, add_completion=False)


@app.command()
def run(
    files: list[Path] = typer.Argument(..., help="Audio files or directories"),
    play: bool = typer.Option(False, "--play", "-p", help="Play audio automatically while processing"),
    skip: bool = typer.Option(False, "--skip", "-s", help="Skip songs that already have lyrics"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
    genre: bool = typer.Option(False, "--genre", "-g", help="Only look up the genre of each song"),
    editor: str | None = typer.Option(None, "--editor", "-e", help="Editor used to edit lyrics"),
    no_edit: bool = typer.Option(False, "--no-edit", help="Disable lyrics editing"),
):
    """
    Find lyrics for audio files and pick the version to keep.
    """
    cfg = load_config()
    if editor:
        cfg = dataclasses.replace(cfg, editor=editor)

    log_path = setup_logging(debug, cfg.log_file, debug_log_file=cfg.config_dir / "debug.log")
    if debug and log_path is not None:
        typer.echo(f"Debug log: {log_path}")
    colorama.just_fix_windows_console()

    http = HttpClient(
        timeout_s=cfg.http_timeout_s,
        max_retries=cfg.api_max_retries,
        backoff_base_s=cfg.api_backoff_base_s,
    )
    service = LyricsService(build_sources(cfg, http), parallel=cfg.parallel_sources)
    picker = LyricsPicker(
        PickerRenderer(use_alt_screen=cfg.use_alt_screen),
        source_order=[s.name for s in service.sources],
        labels={s.name: s.label for s in service.sources},
        editor=None if no_edit else ExternalEditor.detect(cfg.editor),
    )
    processor = FilesProcessor(
        service,
        picker,
        player=AudioPlayer(cfg.player_command),
        genre_lookup=LastFmGenreLookup(http, api_key=cfg.lastfm_api_key),
        play_mode=play,
        skip_mode=skip,
        genre_mode=genre,
    )

    try:
        processor.process(files)
    finally:
        processor.print_skipped_files()
        processor.print_broken_files()


@app.command()
def search(
    title: str = typer.Option(..., "--title", "-t", help="Song title"),
    artist: str = typer.Option(..., "--artist", "-a", help="Song artist"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
):
    """
    Query every configured source and print what each one found.
    """
    cfg = load_config()
    setup_logging(debug, cfg.log_file)
    service = LyricsService.from_config(cfg)

    try:
        variants = service.resolve(Song(title=title, artist=artist))
    except NotFound:
        typer.echo("No lyrics found")
        return

    for name, variant in variants.items():
        typer.echo(f"== {service.label_for(name)}: {variant.display}")
        typer.echo(variant.lyrics)
        typer.echo()


@app.command()
def genre(
    title: str = typer.Option(..., "--title", "-t", help="Song title"),
    artist: str = typer.Option(..., "--artist", "-a", help="Song artist"),
):
    """Look up the genre of a song on Last.fm."""
    cfg = load_config()
    http = HttpClient(timeout_s=cfg.http_timeout_s, max_retries=cfg.api_max_retries, backoff_base_s=cfg.api_backoff_base_s)
    found = LastFmGenreLookup(http, api_key=cfg.lastfm_api_key).lookup(Song(title=title, artist=artist))
    typer.echo(found or "Unknown Genre")


@app.command()
def config(
    genius_token: str | None = typer.Option(None, "--genius-token", help="Genius API access token"),
    lastfm_api_key: str | None = typer.Option(None, "--lastfm-api-key", help="Last.fm API key"),
    sources: str | None = typer.Option(None, "--sources", help="Comma-separated source names"),
    player: str | None = typer.Option(None, "--player", help="Command used to play audio"),
):
    """Store settings in the config file."""
    updates = {
        "genius_token": genius_token,
        "lastfm_api_key": lastfm_api_key,
        "sources": [s.strip() for s in sources.split(",") if s.strip()] if sources else None,
        "player": player,
    }
    changed = False
    for key, value in updates.items():
        if value is not None:
            save_config_value(key, value)
            changed = True
    if not changed:
        typer.echo("Nothing to change; see --help")
        return
    typer.echo(f"Config saved: {load_config().config_dir / 'config.json'}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
