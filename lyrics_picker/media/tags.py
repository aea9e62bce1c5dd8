"""Per-format lyrics tag access, backed by mutagen."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from mutagen import MutagenError
from mutagen.flac import FLAC
from mutagen.id3 import ID3, USLT, ID3NoHeaderError
from mutagen.mp4 import MP4
from mutagen.oggopus import OggOpus
from mutagen.oggvorbis import OggVorbis

from lyrics_picker.errors import SaveFileError, TagReadError, UnsupportedMediaType
from lyrics_picker.sources.types import Song

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TagData:
    title: str = ""
    artist: str = ""
    lyrics: str = ""


class TagCodec:
    def extract(self, path: Path) -> TagData:
        raise NotImplementedError

    def save(self, path: Path, lyrics: str) -> None:
        raise NotImplementedError


def _first(values) -> str:
    if not values:
        return ""
    return str(values[0])


def _id3_text(tags: ID3, frame_id: str) -> str:
    frame = tags.get(frame_id)
    if frame is None or not frame.text:
        return ""
    return str(frame.text[0])


class Mp3Codec(TagCodec):
    def extract(self, path: Path) -> TagData:
        try:
            tags = ID3(path)
        except ID3NoHeaderError:
            return TagData()
        uslt = tags.getall("USLT")
        return TagData(
            title=_id3_text(tags, "TIT2"),
            artist=_id3_text(tags, "TPE1"),
            lyrics=uslt[0].text if uslt else "",
        )

    def save(self, path: Path, lyrics: str) -> None:
        try:
            tags = ID3(path)
        except ID3NoHeaderError:
            tags = ID3()
        tags.delall("USLT")
        tags.add(USLT(encoding=3, lang="und", desc="", text=lyrics))
        tags.save(path)


class Mp4Codec(TagCodec):
    TITLE = "\xa9nam"
    ARTIST = "\xa9ART"
    LYRICS = "\xa9lyr"

    def extract(self, path: Path) -> TagData:
        tags = MP4(path).tags or {}
        return TagData(
            title=_first(tags.get(self.TITLE)),
            artist=_first(tags.get(self.ARTIST)),
            lyrics=_first(tags.get(self.LYRICS)),
        )

    def save(self, path: Path, lyrics: str) -> None:
        audio = MP4(path)
        audio[self.LYRICS] = [lyrics]
        audio.save()


class VorbisCodec(TagCodec):
    """FLAC, Ogg Vorbis and Opus all keep lyrics in a LYRICS comment."""

    def __init__(self, audio_cls):
        self.audio_cls = audio_cls

    def extract(self, path: Path) -> TagData:
        audio = self.audio_cls(path)
        return TagData(
            title=_first(audio.get("title")),
            artist=_first(audio.get("artist")),
            lyrics=_first(audio.get("lyrics")),
        )

    def save(self, path: Path, lyrics: str) -> None:
        audio = self.audio_cls(path)
        audio["LYRICS"] = [lyrics]
        audio.save()


CODECS: dict[str, TagCodec] = {
    ".mp3": Mp3Codec(),
    ".m4a": Mp4Codec(),
    ".mp4": Mp4Codec(),
    ".flac": VorbisCodec(FLAC),
    ".ogg": VorbisCodec(OggVorbis),
    ".opus": VorbisCodec(OggOpus),
}


def codec_for(path: Path) -> TagCodec:
    codec = CODECS.get(path.suffix.lower())
    if codec is None:
        raise UnsupportedMediaType(str(path))
    return codec


@dataclass(slots=True)
class AudioTrack:
    path: Path
    title: str
    artist: str
    lyrics: str
    codec: TagCodec = field(repr=False)

    @property
    def filetype(self) -> str:
        return self.path.suffix.lower()

    @property
    def filename(self) -> str:
        return self.path.name

    @property
    def song(self) -> Song:
        return Song(title=self.title, artist=self.artist)

    def __str__(self) -> str:
        return f"[{self.filetype}] {self.artist} - {self.title} ({self.filename})"


def load_track(path: str | Path) -> AudioTrack:
    """Read title/artist/lyrics; raises UnsupportedMediaType or TagReadError."""
    p = Path(path).expanduser().resolve()
    codec = codec_for(p)
    logger.debug("Loading song from file: %s (filetype %s)", p, p.suffix)
    try:
        data = codec.extract(p)
    except (MutagenError, OSError) as e:
        raise TagReadError(f"{p}: {e}") from e
    return AudioTrack(path=p, title=data.title, artist=data.artist, lyrics=data.lyrics, codec=codec)


def save_lyrics(track: AudioTrack, text: str) -> None:
    logger.debug("Saving lyrics to %s", track.path)
    try:
        track.codec.save(track.path, text)
    except (MutagenError, OSError) as e:
        raise SaveFileError(f"{track.path}: {e}") from e
    track.lyrics = text
