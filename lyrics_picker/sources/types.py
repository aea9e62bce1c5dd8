from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True, slots=True)
class Song:
    title: str
    artist: str

    @property
    def display(self) -> str:
        return f"{self.artist} - {self.title}"

    def __str__(self) -> str:
        return self.display


@dataclass(slots=True)
class Variant:
    """One candidate lyrics text attributed to a provider."""

    source: str
    title: str
    artist: str
    lyrics: str

    @property
    def display(self) -> str:
        return f"{self.artist} - {self.title}"


@dataclass(frozen=True, slots=True)
class Candidate:
    """Raw search hit as returned by a provider, before ranking."""

    title: str
    artist: str
    locator: str = ""
    # provider-specific display name, e.g. Tekstowo's "artist - title"
    name: str = ""
    # some providers ship the text inside the search payload
    lyrics: str | None = None


# source name -> Variant, in source registration order
VariantSet = Dict[str, Variant]
