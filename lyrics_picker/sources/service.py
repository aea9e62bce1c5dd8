from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from lyrics_picker.config import AppConfig
from lyrics_picker.errors import NotFound

from .base import LyricsSource
from .genius import GeniusSource
from .http import HttpClient
from .lrclib import LrcLibSource
from .lyrics_ovh import LyricsOvhSource
from .tekstowo import TekstowoSource
from .types import Song, Variant, VariantSet

logger = logging.getLogger(__name__)


class LyricsService:
    """Queries every registered source and keeps whatever they find."""

    def __init__(self, sources: Sequence[LyricsSource], *, parallel: bool = False):
        self.sources = list(sources)
        self.parallel = parallel

    @classmethod
    def from_config(cls, cfg: AppConfig) -> "LyricsService":
        return cls(build_sources(cfg), parallel=cfg.parallel_sources)

    def resolve(self, song: Song) -> VariantSet:
        if self.parallel and len(self.sources) > 1:
            found = self._search_parallel(song)
        else:
            found = [self._search_one(src, song) for src in self.sources]

        # merge in registration order regardless of completion order
        variants: VariantSet = {}
        for src, variant in zip(self.sources, found):
            if variant is not None:
                variants[src.name] = variant

        if not variants:
            raise NotFound(song.display)
        return variants

    def _search_parallel(self, song: Song) -> list[Variant | None]:
        with ThreadPoolExecutor(max_workers=len(self.sources)) as pool:
            futures = [pool.submit(self._search_one, src, song) for src in self.sources]
            return [f.result() for f in futures]

    @staticmethod
    def _search_one(src: LyricsSource, song: Song) -> Variant | None:
        try:
            return src.search(song)
        except NotFound:
            logger.info("%s: no lyrics for %s", src.label, song)
            return None

    def label_for(self, source_name: str) -> str:
        for src in self.sources:
            if src.name == source_name:
                return src.label
        return source_name.capitalize()


def build_sources(cfg: AppConfig, http: HttpClient | None = None) -> list[LyricsSource]:
    http = http or HttpClient(
        timeout_s=cfg.http_timeout_s,
        max_retries=cfg.api_max_retries,
        backoff_base_s=cfg.api_backoff_base_s,
    )
    out: list[LyricsSource] = []
    for s in cfg.sources:
        name = s.strip().lower()
        if name == "genius":
            if not cfg.genius_token:
                logger.info("Genius source configured without an access token, skipping")
                continue
            out.append(GeniusSource(http, access_token=cfg.genius_token))
        elif name == "tekstowo":
            out.append(TekstowoSource(http))
        elif name == "lrclib":
            out.append(LrcLibSource(http))
        elif name in ("lyrics_ovh", "lyrics.ovh", "ovh"):
            out.append(LyricsOvhSource(http))
        else:
            logger.info("Unknown source '%s' in config, skipping", s)
    return out
