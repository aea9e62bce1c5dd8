from __future__ import annotations

import logging
from urllib.parse import quote_plus

from bs4 import BeautifulSoup

from lyrics_picker.match.distance import distance

from .base import LyricsSource
from .types import Candidate, Song

logger = logging.getLogger(__name__)

PAGE_URL = "https://www.tekstowo.pl"


def split_name(name: str) -> tuple[str, str]:
    """'Artist - Title' -> (artist, title); title is empty without a separator."""
    artist, _, title = name.partition(" - ")
    return artist.strip(), title.strip()


class TekstowoSource(LyricsSource):
    name = "tekstowo"
    max_candidates = 10

    @staticmethod
    def build_url(song: Song) -> str:
        return f"{PAGE_URL}/szukaj,wykonawca,{quote_plus(song.artist)},tytul,{quote_plus(song.title)}"

    def fetch_candidates(self, song: Song) -> list[Candidate]:
        url = self.build_url(song)
        logger.debug("  url='%s'", url)
        return parse_search_page(self.http.get_text(url))

    def score(self, candidate: Candidate, song: Song) -> int | None:
        # entries are only usable as "artist - title"
        if not candidate.name or "-" not in candidate.name or not candidate.locator:
            logger.debug("- skipping malformed entry: %r", candidate.name)
            return None
        d = distance(candidate.name, song.display)
        logger.debug("- name: '%s'  distance: %s", candidate.name, d)
        return d

    def fetch_lyrics(self, candidate: Candidate) -> str | None:
        logger.debug("Extracting lyrics from url: %s", candidate.locator)
        return extract_lyrics(self.http.get_text(candidate.locator))


def parse_search_page(html: str) -> list[Candidate]:
    soup = BeautifulSoup(html, "html.parser")
    out: list[Candidate] = []
    for element in soup.select("div.content > div.box-przeboje"):
        link = element.select_one("a.title")
        name = (link.get("title") or "").strip() if link else ""
        href = (link.get("href") or "") if link else ""
        artist, title = split_name(name)
        out.append(Candidate(title=title, artist=artist, locator=f"{PAGE_URL}{href}" if href else "", name=name))
    return out


def extract_lyrics(html: str) -> str | None:
    soup = BeautifulSoup(html, "html.parser")
    inner = soup.select_one("div.song-text div.inner-text")
    if inner is not None:
        return inner.get_text()
    box = soup.select_one("div.song-text")
    if box is None:
        return None
    # only the box's own text nodes; child elements hold headings and buttons
    return "".join(box.find_all(string=True, recursive=False))
