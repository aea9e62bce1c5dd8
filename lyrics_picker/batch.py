from __future__ import annotations

import logging
import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Protocol

import typer
from colorama import Fore, Style

from lyrics_picker.errors import NotFound, SaveFileError, TagReadError, UnsupportedMediaType
from lyrics_picker.media.player import AudioPlayer
from lyrics_picker.media.tags import AudioTrack, load_track, save_lyrics
from lyrics_picker.picker.picker import LyricsPicker
from lyrics_picker.picker.session import OutcomeKind
from lyrics_picker.sources.service import LyricsService
from lyrics_picker.sources.types import Song

logger = logging.getLogger(__name__)


class GenreLookup(Protocol):
    def lookup(self, song: Song) -> str | None: ...


@dataclass
class BatchReport:
    skipped: list[str] = field(default_factory=list)
    broken: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class Label:
    text: str
    color: str = Fore.WHITE

    def styled(self) -> str:
        return f"{self.color}{Style.BRIGHT}{self.text}{Style.RESET_ALL}"


class FilesProcessor:
    """
    Walks files and directories and runs the lyrics pipeline for each file:
    read tags, find lyrics, let the operator pick, write the choice back.
    """

    def __init__(
        self,
        service: LyricsService,
        picker: LyricsPicker,
        *,
        player: AudioPlayer | None = None,
        genre_lookup: GenreLookup | None = None,
        play_mode: bool = False,
        skip_mode: bool = False,
        genre_mode: bool = False,
        load: Callable[[Path], AudioTrack] = load_track,
        save: Callable[[AudioTrack, str], None] = save_lyrics,
        echo: Callable[[str], None] = typer.echo,
    ):
        self.service = service
        self.picker = picker
        self.player = player
        self.genre_lookup = genre_lookup
        self.play_mode = play_mode
        self.skip_mode = skip_mode
        self.genre_mode = genre_mode
        self.load = load
        self.save = save
        self.echo = echo
        self.report = BatchReport()

    def process(self, items: Iterable[str | Path]) -> BatchReport:
        for item in items:
            self.process_item(Path(item))
        return self.report

    def process_item(self, path: Path, level: int = 0) -> None:
        if path.is_dir():
            self._print(f"{Fore.BLUE}{path}{Style.RESET_ALL}", None, level)
            logger.debug("Processing directory: %s", path)
            for child in path.iterdir():
                self.process_item(child, level + 1)
        else:
            self.process_file(path, level)

    def process_file(self, path: Path, level: int = 0) -> Label:
        logger.debug("Processing audio file: %s", path)
        track: AudioTrack | None = None
        playback = None
        label = Label("")
        try:
            track = self.load(path)
            logger.debug("  song: %s", track)

            if self.genre_mode:
                genre = self.genre_lookup.lookup(track.song) if self.genre_lookup else None
                label = Label(genre or "Unknown Genre", Fore.MAGENTA)
                return label

            if self.skip_mode and track.lyrics:
                label = Label("Automatically Skipped", Fore.YELLOW)
                return label

            if self.player is not None:
                playback = self.player.for_file(track.path)
                if self.play_mode:
                    playback.play()

            variants = self.service.resolve(track.song)
            outcome = self.picker.pick(track, variants, playback=playback)

            if outcome.kind is OutcomeKind.ADOPT:
                self.save(track, variants[outcome.source].lyrics)
                label = Label(self.service.label_for(outcome.source), Fore.GREEN)
            elif outcome.kind is OutcomeKind.ORIGINAL:
                label = Label("Original")
            else:
                self.report.skipped.append(str(track.path))
                label = Label("Skipped", Fore.YELLOW)
        except UnsupportedMediaType:
            label = Label("Unsupported File", Fore.RED)
        except TagReadError as e:
            logger.warning("Cannot read tags: %s", e)
            self.report.broken.append(str(path))
            label = Label("Broken File", Fore.RED)
        except SaveFileError as e:
            logger.warning("Cannot save lyrics: %s", e)
            self.report.broken.append(str(track.path if track else path))
            label = Label("Save Error", Fore.RED)
        except NotFound:
            self.report.broken.append(str(track.path if track else path))
            label = Label("Lyrics Not Found", Fore.RED)
        except Exception:
            # one bad file must not stop the rest of the batch
            logger.exception("Unexpected error while processing %s", path)
            self.report.broken.append(str(track.path if track else path))
            label = Label("Broken File", Fore.RED)
        finally:
            if playback is not None:
                playback.stop()
            self._print(str(track) if track else str(path), label, level)
        return label

    def print_skipped_files(self) -> None:
        self._print_report("Skipped files:", Fore.YELLOW, self.report.skipped)

    def print_broken_files(self) -> None:
        self._print_report("Broken files:", Fore.RED, self.report.broken)

    def _print_report(self, header: str, color: str, files: list[str]) -> None:
        if not files:
            return
        self.echo(f"\n{color}{Style.BRIGHT}{header}{Style.RESET_ALL}")
        for f in files:
            self.echo("  " + shlex.quote(f))

    def _print(self, text: str, label: Label | None, level: int) -> None:
        prefix = "  " * level
        suffix = f" {Fore.BLUE}⟶{Style.RESET_ALL}   {label.styled()}" if label and label.text else ""
        self.echo(f"{prefix}{text}{suffix}")
