from __future__ import annotations

import requests

from .base import LyricsSource
from .types import Candidate, Song

API_URL = "https://api.lyrics.ovh"


class LyricsOvhSource(LyricsSource):
    name = "lyrics_ovh"
    max_candidates = 5

    @property
    def label(self) -> str:
        return "Lyrics.ovh"

    def fetch_candidates(self, song: Song) -> list[Candidate]:
        data = self.http.get_json(f"{API_URL}/suggest/{requests.utils.quote(song.display)}")
        out: list[Candidate] = []
        for item in data.get("data", []):
            out.append(
                Candidate(
                    title=item.get("title") or "",
                    artist=(item.get("artist") or {}).get("name") or "",
                )
            )
        return out

    def fetch_lyrics(self, candidate: Candidate) -> str | None:
        url = f"{API_URL}/v1/{requests.utils.quote(candidate.artist)}/{requests.utils.quote(candidate.title)}"
        data = self.http.get_json(url)
        lyrics = data.get("lyrics")
        # This source is plain lyrics (no timing). Keep text as-is.
        return str(lyrics) if lyrics else None
