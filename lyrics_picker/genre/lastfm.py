from __future__ import annotations

import logging

import requests

from lyrics_picker.errors import NotFound
from lyrics_picker.sources.http import HttpClient
from lyrics_picker.sources.types import Song

logger = logging.getLogger(__name__)

LAST_FM_URL = "https://ws.audioscrobbler.com/2.0/"


class LastFmGenreLookup:
    """Top tag of a track on Last.fm, used as its genre."""

    def __init__(self, http: HttpClient, *, api_key: str | None):
        self.http = http
        self.api_key = api_key

    def lookup(self, song: Song) -> str | None:
        if not self.api_key:
            logger.warning("No Last.fm API key configured, genre lookup disabled")
            return None

        params = {
            "method": "track.gettoptags",
            "artist": song.artist,
            "track": song.title,
            "api_key": self.api_key,
            "autocorrect": 1,
            "format": "json",
        }
        try:
            data = self.http.get_json(LAST_FM_URL, params=params)
        except (NotFound, requests.RequestException, ValueError) as e:
            logger.warning("Last.fm lookup for '%s' failed: %s", song, e)
            return None

        tags = (data.get("toptags") or {}).get("tag") or []
        if isinstance(tags, dict):
            # a single tag comes back as an object
            tags = [tags]
        if not tags:
            return None
        return tags[0].get("name") or None
