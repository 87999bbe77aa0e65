"""Tests for skriva.core.config – YAML settings."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from skriva.core.config import (
    Settings,
    default_settings_path,
    load_settings,
    save_settings,
    validate,
)
from skriva.core.matching import MatchSettings


@pytest.fixture()
def settings_file(tmp_path: Path) -> Path:
    return tmp_path / "settings.yaml"


class TestDefaults:
    def test_default_path_under_home(self, tmp_path, monkeypatch):
        monkeypatch.setattr(Path, "home", lambda: tmp_path)
        assert default_settings_path() == tmp_path / ".skriva" / "settings.yaml"

    def test_missing_file_gives_defaults(self, settings_file):
        assert load_settings(settings_file) == Settings()

    def test_empty_file_gives_defaults(self, settings_file):
        settings_file.write_text("", encoding="utf-8")
        assert load_settings(settings_file) == Settings()

    def test_default_values(self):
        s = Settings()
        assert s.tracing == MatchSettings()
        assert s.sound_enabled is True


class TestLoad:
    def test_partial_override(self, settings_file):
        settings_file.write_text(
            "tracing:\n  acceptance_radius: 90\n  look_ahead: 3\nsound_enabled: false\n",
            encoding="utf-8",
        )
        s = load_settings(settings_file)
        assert s.tracing.acceptance_radius == 90.0
        assert isinstance(s.tracing.acceptance_radius, float)
        assert s.tracing.look_ahead == 3
        assert s.tracing.max_advance == 2
        assert s.sound_enabled is False

    def test_unknown_keys_ignored(self, settings_file):
        settings_file.write_text("tracing:\n  wobble: 3\ntheme: dark\nvolume: 0.5\n", encoding="utf-8")
        assert load_settings(settings_file) == Settings()

    def test_sound_toggle(self, settings_file):
        settings_file.write_text("sound_enabled: false\n", encoding="utf-8")
        assert load_settings(settings_file).sound_enabled is False

    def test_broken_yaml_logs_and_defaults(self, settings_file, caplog):
        settings_file.write_text("tracing: [unclosed\n", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="skriva.core.config"):
            assert load_settings(settings_file) == Settings()
        assert "Could not load settings" in caplog.text

    def test_top_level_list_rejected(self, settings_file):
        settings_file.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ValueError, match="settings.yaml"):
            load_settings(settings_file)

    def test_non_numeric_value_rejected(self, settings_file):
        settings_file.write_text("tracing:\n  look_ahead: many\n", encoding="utf-8")
        with pytest.raises(ValueError, match="settings.yaml"):
            load_settings(settings_file)

    def test_tracing_must_be_mapping(self, settings_file):
        settings_file.write_text("tracing: 5\n", encoding="utf-8")
        with pytest.raises(ValueError, match="'tracing' must be a mapping"):
            load_settings(settings_file)

    def test_out_of_range_rejected(self, settings_file):
        settings_file.write_text("tracing:\n  acceptance_radius: -1\n", encoding="utf-8")
        with pytest.raises(ValueError, match="acceptance_radius"):
            load_settings(settings_file)


class TestSave:
    def test_save_then_load(self, settings_file):
        custom = Settings(
            tracing=MatchSettings(acceptance_radius=80.0, min_update_interval=0.1),
            sound_enabled=False,
        )
        save_settings(custom, settings_file)
        assert load_settings(settings_file) == custom

    def test_creates_parent_dir(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "settings.yaml"
        save_settings(Settings(), path)
        assert path.exists()


class TestValidate:
    def test_defaults_are_valid(self):
        validate(Settings())

    @pytest.mark.parametrize(
        "tracing",
        [
            MatchSettings(acceptance_radius=0),
            MatchSettings(start_radius_factor=0),
            MatchSettings(look_ahead=0),
            MatchSettings(max_advance=-1),
            MatchSettings(resume_window=0),
            MatchSettings(min_update_interval=-0.01),
        ],
    )
    def test_bad_tracing(self, tracing):
        with pytest.raises(ValueError):
            validate(Settings(tracing=tracing))
