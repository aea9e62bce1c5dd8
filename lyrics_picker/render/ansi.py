from __future__ import annotations

import shutil
import signal
import sys
from dataclasses import dataclass
from typing import Callable, TextIO

import click


CSI = "\x1b["


def _sgr(*codes: int) -> str:
    return CSI + ";".join(str(c) for c in codes) + "m"


def _at(row: int, col: int) -> str:
    return f"{CSI}{row + 1};{col + 1}H"


@dataclass(frozen=True, slots=True)
class Theme:
    # one color per source, assigned in registration order
    sources: tuple[str, ...] = (
        _sgr(34),  # blue
        _sgr(32),  # green
        _sgr(36),  # cyan
        _sgr(31),  # red
        _sgr(35),  # magenta
        _sgr(33),  # yellow
    )
    song: str = _sgr(37)  # white
    reverse: str = _sgr(7)
    bold: str = _sgr(1)
    control: str = _sgr(30, 47)  # black on white
    info: str = _sgr(37, 42, 1, 5)  # white on green, bold, blink
    reset: str = _sgr(0)

    def source_color(self, index: int) -> str:
        return self.sources[index % len(self.sources)]


@dataclass(frozen=True, slots=True)
class PickerFrame:
    source_label: str
    color_index: int
    title: str
    artist: str
    lyrics: str
    track_title: str
    track_artist: str
    filename: str
    original_lyrics: str
    identical: bool
    can_edit: bool


IDENTICAL_TEXT = "LYRICS ARE THE SAME"

MARGIN = 3
HEADER_HEIGHT = 6
HEADER_POS_Y = 1
HEADER_TITLE_ROW = 2
HEADER_ARTIST_ROW = 3


def control_texts(source_label: str, can_edit: bool) -> list[str]:
    """Control bar variants, shortest first."""
    edit_short = " [E] |" if can_edit else ""
    return [
        f"| ◀ | ▶ | ▲ | ▼ |{edit_short} [P] | [S] |",
        f"| ◀ {source_label} | ▶ Original | ▲ Skip | ▼ Switch |{edit_short} [P] | [S] |",
        f"| ◀ {source_label} | ▶ Original | ▲ Skip | ▼ Switch |"
        f"{' [E]dit |' if can_edit else ''} [P]lay | [S]top |",
        f"| ◀ Choose {source_label} | ▶ Keep Original | ▲ Skip | ▼ Change lyrics source |"
        f"{f' [E] Edit {source_label} lyrics |' if can_edit else ''}"
        " [P] Play audio | [S] Stop playing audio |",
    ]


def pick_control_text(cols: int, texts: list[str]) -> str:
    chosen = texts[0]
    for t in texts[1:]:
        if len(t) <= cols:
            chosen = t
    return chosen[:cols]


def _center(width: int, text: str) -> int:
    return max((width - len(text)) // 2, 1)


class PickerRenderer:
    """Draws the picker screen with raw ANSI sequences and reads single key presses."""

    def __init__(
        self,
        use_alt_screen: bool = True,
        theme: Theme | None = None,
        out: TextIO | None = None,
        getchar: Callable[[], str] | None = None,
    ):
        self.use_alt_screen = use_alt_screen
        self.theme = theme or Theme()
        self.out = out or sys.stdout
        self._getchar = getchar or click.getchar
        self._entered = False
        self._resize_handler: Callable[[], None] | None = None
        self._last_frame: PickerFrame | None = None

    def __enter__(self):
        self.enter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.exit()

    def enter(self) -> None:
        if self._entered:
            return
        if self.use_alt_screen:
            self.out.write(CSI + "?1049h")  # alt screen
        self.out.write(CSI + "?25l")  # hide cursor
        self.out.write(CSI + "H" + CSI + "2J")  # home + clear
        self.out.flush()
        self._entered = True

        # Register SIGWINCH handler for resize
        def _on_resize(signum=None, frame=None):
            if self._last_frame:
                self.render(self._last_frame)

        self._resize_handler = _on_resize
        if hasattr(signal, "SIGWINCH"):
            signal.signal(signal.SIGWINCH, _on_resize)

    def exit(self) -> None:
        if not self._entered:
            return
        # Restore default SIGWINCH handler
        if self._resize_handler and hasattr(signal, "SIGWINCH"):
            signal.signal(signal.SIGWINCH, signal.SIG_DFL)
        self._resize_handler = None
        self.out.write(self.theme.reset)
        self.out.write(CSI + "?25h")  # show cursor
        if self.use_alt_screen:
            self.out.write(CSI + "?1049l")  # normal screen
        self.out.flush()
        self._entered = False
        self._last_frame = None

    def read_key(self) -> str:
        return self._getchar()

    def render(self, frame: PickerFrame) -> None:
        # Store frame for SIGWINCH redraw
        self._last_frame = frame

        cols, rows = shutil.get_terminal_size(fallback=(80, 24))
        col_width = max(cols // 2 - MARGIN, 8)
        color = self.theme.source_color(frame.color_index)

        buf: list[str] = [CSI + "H" + CSI + "2J"]
        buf += self._column(
            pos_x=MARGIN,
            width=col_width,
            rows=rows,
            label=frame.source_label,
            title=frame.title,
            artist=frame.artist,
            lyrics=frame.lyrics,
            color=color,
        )
        buf += self._column(
            pos_x=MARGIN + col_width,
            width=col_width,
            rows=rows,
            label=frame.filename,
            title=frame.track_title,
            artist=frame.track_artist,
            lyrics=frame.original_lyrics,
            color=self.theme.song,
        )
        buf += self._controls(cols, rows, frame)
        if frame.identical:
            buf += self._identical_banner(cols, rows, col_width)

        self.out.write("".join(buf))
        self.out.write(self.theme.reset)
        self.out.flush()

    def _box(self, pos_y: int, pos_x: int, height: int, width: int, style: str) -> list[str]:
        inner = max(width - 2, 0)
        out = [style, _at(pos_y, pos_x), "┌" + "─" * inner + "┐"]
        for r in range(1, height - 1):
            out.append(_at(pos_y + r, pos_x) + "│" + " " * inner + "│")
        out.append(_at(pos_y + height - 1, pos_x) + "└" + "─" * inner + "┘")
        return out

    def _column(
        self,
        *,
        pos_x: int,
        width: int,
        rows: int,
        label: str,
        title: str,
        artist: str,
        lyrics: str,
        color: str,
    ) -> list[str]:
        t = self.theme
        inner = width - 2
        out: list[str] = []

        # header
        out += self._box(HEADER_POS_Y, pos_x, HEADER_HEIGHT, width, color + t.reverse)
        title_u = title.upper()[:inner]
        out.append(_at(HEADER_POS_Y + HEADER_TITLE_ROW, pos_x + _center(width, title_u)) + t.bold + title_u)
        out.append(t.reset + color + t.reverse)
        artist_c = artist[:inner]
        out.append(_at(HEADER_POS_Y + HEADER_ARTIST_ROW, pos_x + _center(width, artist_c)) + artist_c)
        header_label = f" {label} "[:inner]
        out.append(_at(HEADER_POS_Y, pos_x + _center(width, header_label)) + t.bold + header_label)
        out.append(t.reset)

        # lyrics
        box_y = HEADER_POS_Y + HEADER_HEIGHT
        box_height = max(rows - box_y - 1, 3)
        out += self._box(box_y, pos_x, box_height, width, color)
        for i, line in enumerate(lyrics.split("\n")):
            if i > box_height - 4:
                break
            line = line[:inner]
            out.append(_at(box_y + i + 1, pos_x + _center(width, line)) + line)
        out.append(t.reset)
        return out

    def _controls(self, cols: int, rows: int, frame: PickerFrame) -> list[str]:
        text = pick_control_text(cols, control_texts(frame.source_label, frame.can_edit))
        return [self.theme.control, _at(rows - 1, 0), text.ljust(cols), self.theme.reset]

    def _identical_banner(self, cols: int, rows: int, col_width: int) -> list[str]:
        width = max(len(IDENTICAL_TEXT) + 4, cols // 4)
        pos_y = max(rows // 2 - 2, 0)
        pos_x = max(MARGIN + col_width - width // 2 - 1, 0)
        out = self._box(pos_y, pos_x, 3, width, self.theme.info)
        out.append(_at(pos_y + 1, pos_x + _center(width, IDENTICAL_TEXT)) + IDENTICAL_TEXT)
        out.append(self.theme.reset)
        return out
