from __future__ import annotations

import pytest

from lyrics_picker.config import DEFAULT_SOURCES, load_config, save_config_value

ENV_KEYS = [
    "LYRICS_PICKER_SOURCES",
    "LYRICS_PICKER_GENIUS_TOKEN",
    "GENIUS_ACCESS_TOKEN",
    "LYRICS_PICKER_LASTFM_API_KEY",
    "LYRICS_PICKER_PLAYER",
    "LYRICS_PICKER_EDITOR",
    "VISUAL",
    "EDITOR",
    "LYRICS_PICKER_PARALLEL",
    "LYRICS_PICKER_ALT_SCREEN",
    "LYRICS_PICKER_LOG_FILE",
]


@pytest.fixture(autouse=True)
def clean_env(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestLoadConfig:
    def test_defaults(self, tmp_path):
        cfg = load_config()
        assert cfg.config_dir == tmp_path / "lyrics-picker"
        assert cfg.sources == DEFAULT_SOURCES
        assert cfg.genius_token is None
        assert cfg.editor == "nano"
        assert cfg.parallel_sources is False
        assert cfg.use_alt_screen is True
        assert cfg.log_file is None

    def test_env(self, monkeypatch):
        monkeypatch.setenv("LYRICS_PICKER_SOURCES", "tekstowo, lrclib ,")
        monkeypatch.setenv("GENIUS_ACCESS_TOKEN", "g")
        monkeypatch.setenv("EDITOR", "vim")
        monkeypatch.setenv("LYRICS_PICKER_PARALLEL", "1")
        monkeypatch.setenv("LYRICS_PICKER_ALT_SCREEN", "0")
        monkeypatch.setenv("LYRICS_PICKER_LOG_FILE", "/tmp/lp.log")

        cfg = load_config()
        assert cfg.sources == ("tekstowo", "lrclib")
        assert cfg.genius_token == "g"
        assert cfg.editor == "vim"
        assert cfg.parallel_sources is True
        assert cfg.use_alt_screen is False
        assert str(cfg.log_file) == "/tmp/lp.log"

    def test_config_file_over_env(self, monkeypatch):
        monkeypatch.setenv("LYRICS_PICKER_GENIUS_TOKEN", "from-env")
        save_config_value("genius_token", "from-file")
        save_config_value("sources", ["lyrics_ovh"])

        cfg = load_config()
        assert cfg.genius_token == "from-file"
        assert cfg.sources == ("lyrics_ovh",)

    def test_broken_config_file_is_ignored(self, tmp_path, monkeypatch):
        (tmp_path / "lyrics-picker").mkdir()
        (tmp_path / "lyrics-picker" / "config.json").write_text("{not json", encoding="utf-8")
        monkeypatch.setenv("LYRICS_PICKER_PLAYER", "ffplay -nodisp")

        cfg = load_config()
        assert cfg.player_command == "ffplay -nodisp"

    def test_save_keeps_other_keys(self):
        save_config_value("lastfm_api_key", "k")
        save_config_value("player", "afplay")
        cfg = load_config()
        assert cfg.lastfm_api_key == "k"
        assert cfg.player_command == "afplay"
