from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_SOURCES = ("genius", "tekstowo", "lrclib")


def _config_dir() -> Path:
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "lyrics-picker"
    return Path.home() / ".config" / "lyrics-picker"


def _config_file() -> Path:
    return _config_dir() / "config.json"


def _default_player() -> str:
    if sys.platform == "darwin":
        return "afplay"
    return "mpv --no-video --really-quiet"


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw not in ("0", "false", "False", "no", "")


@dataclass(frozen=True)
class AppConfig:
    config_dir: Path

    # Sources
    sources: tuple[str, ...]
    genius_token: str | None
    lastfm_api_key: str | None
    http_timeout_s: float
    api_max_retries: int
    api_backoff_base_s: float
    parallel_sources: bool

    # Interaction
    player_command: str
    editor: str | None
    use_alt_screen: bool

    # Logging
    log_file: Path | None


def load_config() -> AppConfig:
    # Priority per key: config.json -> environment -> default
    config_dir = _config_dir()
    file_cfg = _load_file(config_dir / "config.json")

    sources_raw = file_cfg.get("sources") or os.getenv("LYRICS_PICKER_SOURCES")
    if isinstance(sources_raw, str):
        sources = tuple(s.strip() for s in sources_raw.split(",") if s.strip())
    elif sources_raw:
        sources = tuple(str(s).strip() for s in sources_raw if str(s).strip())
    else:
        sources = DEFAULT_SOURCES

    log_file = os.getenv("LYRICS_PICKER_LOG_FILE")

    return AppConfig(
        config_dir=config_dir,
        sources=sources,
        genius_token=file_cfg.get("genius_token")
        or os.getenv("LYRICS_PICKER_GENIUS_TOKEN")
        or os.getenv("GENIUS_ACCESS_TOKEN")
        or None,
        lastfm_api_key=file_cfg.get("lastfm_api_key") or os.getenv("LYRICS_PICKER_LASTFM_API_KEY") or None,
        http_timeout_s=float(os.getenv("LYRICS_PICKER_HTTP_TIMEOUT", "10.0")),
        api_max_retries=int(os.getenv("LYRICS_PICKER_API_MAX_RETRIES", "3")),
        api_backoff_base_s=float(os.getenv("LYRICS_PICKER_API_BACKOFF_BASE", "1.0")),
        parallel_sources=_env_flag("LYRICS_PICKER_PARALLEL", False),
        player_command=file_cfg.get("player") or os.getenv("LYRICS_PICKER_PLAYER") or _default_player(),
        editor=file_cfg.get("editor")
        or os.getenv("LYRICS_PICKER_EDITOR")
        or os.getenv("VISUAL")
        or os.getenv("EDITOR")
        or "nano",
        use_alt_screen=_env_flag("LYRICS_PICKER_ALT_SCREEN", True),
        log_file=Path(log_file) if log_file else None,
    )


def _load_file(cfg_path: Path) -> dict[str, Any]:
    if not cfg_path.exists():
        return {}
    try:
        data = json.loads(cfg_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", cfg_path, e)
        return {}
    return data if isinstance(data, dict) else {}


def save_config_value(key: str, value: Any) -> None:
    cfg_path = _config_file()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    data = _load_file(cfg_path)
    data[key] = value
    cfg_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
