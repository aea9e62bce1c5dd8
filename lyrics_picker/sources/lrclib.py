from __future__ import annotations

from .base import LyricsSource
from .types import Candidate, Song

SEARCH_URL = "https://lrclib.net/api/search"


class LrcLibSource(LyricsSource):
    name = "lrclib"
    max_candidates = 10

    @property
    def label(self) -> str:
        return "LRCLIB"

    def fetch_candidates(self, song: Song) -> list[Candidate]:
        data = self.http.get_json(SEARCH_URL, params={"q": song.display})
        out: list[Candidate] = []
        for item in data or []:
            if item.get("instrumental"):
                continue
            out.append(
                Candidate(
                    title=item.get("trackName") or "",
                    artist=item.get("artistName") or "",
                    locator=str(item.get("id") or ""),
                    lyrics=item.get("plainLyrics"),
                )
            )
        return out

    def fetch_lyrics(self, candidate: Candidate) -> str | None:
        # search results already carry the plain text
        return candidate.lyrics
