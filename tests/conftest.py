from __future__ import annotations

from pathlib import Path

import pytest

from lyrics_picker.media.tags import AudioTrack
from lyrics_picker.sources.types import Variant
from tests.mocks.fakes import MemoryCodec


@pytest.fixture
def make_track():
    def _make(path="song.mp3", title="Hey Jude", artist="The Beatles", lyrics=""):
        return AudioTrack(path=Path(path), title=title, artist=artist, lyrics=lyrics, codec=MemoryCodec())

    return _make


@pytest.fixture
def variants():
    return {
        "genius": Variant("genius", "Hey Jude", "The Beatles", "Hey Jude, don't make it bad"),
        "tekstowo": Variant("tekstowo", "Hey Jude", "Beatles", "Hey Jude, don't be afraid"),
    }
