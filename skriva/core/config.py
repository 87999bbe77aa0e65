from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from skriva.core.matching import MatchSettings

logger = logging.getLogger(__name__)


def default_settings_path() -> Path:
    return Path.home() / ".skriva" / "settings.yaml"


@dataclass(frozen=True)
class Settings:
    tracing: MatchSettings = field(default_factory=MatchSettings)
    sound_enabled: bool = True


def load_settings(path: Optional[Path] = None) -> Settings:
    """Read settings from YAML, falling back to defaults for anything missing.

    An unreadable file logs a warning and yields defaults; a readable file
    with bad values raises ValueError naming the file.
    """
    path = path or default_settings_path()
    if not path.exists():
        return Settings()
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, OSError) as e:
        logger.warning("Could not load settings from %s: %s", path, e)
        return Settings()
    if raw is None:
        return Settings()
    if not isinstance(raw, dict):
        raise ValueError(f"{path.name}: expected a mapping at the top level")

    try:
        settings = _from_mapping(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{path.name}: {e}") from e
    validate(settings)
    return settings


def save_settings(settings: Settings, path: Optional[Path] = None) -> None:
    path = path or default_settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "tracing": asdict(settings.tracing),
        "sound_enabled": settings.sound_enabled,
    }
    try:
        path.write_text(yaml.safe_dump(payload, sort_keys=False), encoding="utf-8")
    except OSError as e:
        logger.warning("Could not save settings to %s: %s", path, e)


def validate(settings: Settings) -> None:
    t = settings.tracing
    if t.acceptance_radius <= 0:
        raise ValueError("tracing.acceptance_radius must be positive")
    if t.start_radius_factor <= 0:
        raise ValueError("tracing.start_radius_factor must be positive")
    if t.look_ahead < 1 or t.max_advance < 0 or t.resume_window < 1:
        raise ValueError("tracing window sizes must be at least 1")
    if t.min_update_interval < 0:
        raise ValueError("tracing.min_update_interval cannot be negative")


def _from_mapping(raw: Dict[str, Any]) -> Settings:
    settings = Settings()
    tracing = raw.get("tracing") or {}
    if not isinstance(tracing, dict):
        raise ValueError("'tracing' must be a mapping")
    known = {f.name for f in fields(MatchSettings)}
    overrides: Dict[str, Any] = {}
    for key, value in tracing.items():
        if key not in known:
            continue
        default = getattr(settings.tracing, key)
        overrides[key] = int(value) if isinstance(default, int) else float(value)
    if overrides:
        settings = replace(settings, tracing=replace(settings.tracing, **overrides))
    if "sound_enabled" in raw:
        settings = replace(settings, sound_enabled=bool(raw["sound_enabled"]))
    return settings
