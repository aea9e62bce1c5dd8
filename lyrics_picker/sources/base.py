from __future__ import annotations

import logging
import re

import requests

from lyrics_picker.errors import NotFound
from lyrics_picker.match.distance import distance
from lyrics_picker.match.select import select_best

from .http import HttpClient
from .types import Candidate, Song, Variant

logger = logging.getLogger(__name__)

_BLANK_RUN_RE = re.compile(r"\n{3,}")


def normalize_lyrics(text: str | None) -> str:
    """Collapse 3+ consecutive newlines to a single blank line and trim."""
    if not text:
        return ""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return _BLANK_RUN_RE.sub("\n\n", text.strip()).strip()


class LyricsSource:
    """
    Search-and-rank adapter for one lyrics provider.

    Subclasses provide `fetch_candidates` and `fetch_lyrics`; the ranking is
    shared. Every failure surfaces as NotFound.
    """

    name: str
    max_candidates: int = 5

    def __init__(self, http: HttpClient):
        self.http = http

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def fetch_candidates(self, song: Song) -> list[Candidate]:
        raise NotImplementedError

    def fetch_lyrics(self, candidate: Candidate) -> str | None:
        raise NotImplementedError

    def score(self, candidate: Candidate, song: Song) -> int | None:
        if not candidate.title and not candidate.artist:
            return None
        d_title = distance(candidate.title, song.title)
        d_artist = distance(candidate.artist, song.artist)
        logger.debug(
            "- name: '%s'  distance: %s + %s = %s",
            candidate.name or f"{candidate.artist} - {candidate.title}",
            d_title,
            d_artist,
            d_title + d_artist,
        )
        return d_title + d_artist

    def to_variant(self, candidate: Candidate, lyrics: str) -> Variant:
        return Variant(source=self.name, title=candidate.title, artist=candidate.artist, lyrics=lyrics)

    def search(self, song: Song) -> Variant:
        logger.debug("Searching in %s: %s", self.label, song)
        try:
            candidates = self.fetch_candidates(song)[: self.max_candidates]
            if not candidates:
                logger.debug("No items found!")
                raise NotFound(song.display)

            picked = select_best(candidates, lambda c: self.score(c, song))
            if picked is None:
                raise NotFound(song.display)
            best, best_score = picked
            logger.debug("Item selected: min_distance=%s, item=%r", best_score, best)

            lyrics = normalize_lyrics(self.fetch_lyrics(best))
        except (requests.RequestException, AttributeError, ValueError, KeyError, TypeError) as e:
            logger.warning("%s: search for '%s' failed: %s", self.label, song, e)
            raise NotFound(song.display) from e

        if not lyrics:
            raise NotFound(song.display)
        return self.to_variant(best, lyrics)
