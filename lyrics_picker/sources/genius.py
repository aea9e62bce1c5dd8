from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from .base import LyricsSource
from .http import HttpClient
from .types import Candidate, Song

logger = logging.getLogger(__name__)

API_URL = "https://api.genius.com/search"


class GeniusSource(LyricsSource):
    name = "genius"
    max_candidates = 5

    def __init__(self, http: HttpClient, *, access_token: str):
        super().__init__(http)
        self.access_token = access_token

    def fetch_candidates(self, song: Song) -> list[Candidate]:
        data = self.http.get_json(
            API_URL,
            params={"q": song.display},
            headers={"Authorization": f"Bearer {self.access_token}"},
        )
        out: list[Candidate] = []
        for hit in data.get("response", {}).get("hits", []):
            if hit.get("type", "song") != "song":
                continue
            item = hit.get("result") or {}
            title = item.get("title") or ""
            artist = (item.get("primary_artist") or {}).get("name") or ""
            featured = item.get("title_with_featured") or title
            out.append(
                Candidate(
                    title=title,
                    artist=artist,
                    locator=item.get("url") or "",
                    name=f"{artist} - {featured}",
                )
            )
        return out

    def fetch_lyrics(self, candidate: Candidate) -> str | None:
        if not candidate.locator:
            return None
        logger.debug("Extracting lyrics from url: %s", candidate.locator)
        return extract_lyrics(self.http.get_text(candidate.locator))


def extract_lyrics(html: str) -> str | None:
    soup = BeautifulSoup(html, "html.parser")
    containers = soup.select('div[data-lyrics-container="true"]')
    if containers:
        parts: list[str] = []
        for div in containers:
            for br in div.find_all("br"):
                br.replace_with("\n")
            parts.append(div.get_text())
        return "\n".join(parts)

    # older page layout
    legacy = soup.select_one("div.lyrics")
    return legacy.get_text() if legacy else None
