from __future__ import annotations

import enum


class Action(enum.Enum):
    ACCEPT = "accept"
    ORIGINAL = "original"
    SKIP = "skip"
    NEXT = "next"
    EDIT = "edit"
    PLAY = "play"
    STOP = "stop"


# click.getchar() yields raw escape sequences for arrows on POSIX and
# two-character scan codes on Windows
_ARROWS = {
    "\x1b[D": Action.ACCEPT,
    "\x1bOD": Action.ACCEPT,
    "\xe0K": Action.ACCEPT,
    "\x00K": Action.ACCEPT,
    "\x1b[C": Action.ORIGINAL,
    "\x1bOC": Action.ORIGINAL,
    "\xe0M": Action.ORIGINAL,
    "\x00M": Action.ORIGINAL,
    "\x1b[A": Action.SKIP,
    "\x1bOA": Action.SKIP,
    "\xe0H": Action.SKIP,
    "\x00H": Action.SKIP,
    "\x1b[B": Action.NEXT,
    "\x1bOB": Action.NEXT,
    "\xe0P": Action.NEXT,
    "\x00P": Action.NEXT,
}

_LETTERS = {
    "e": Action.EDIT,
    "p": Action.PLAY,
    "s": Action.STOP,
}


def decode_key(raw: str) -> Action | None:
    """Map one key press to a picker action; unknown keys map to None."""
    if raw in _ARROWS:
        return _ARROWS[raw]
    if len(raw) == 1:
        return _LETTERS.get(raw.lower())
    return None
