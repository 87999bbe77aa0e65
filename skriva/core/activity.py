from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from skriva.core.events import SessionCompleted

logger = logging.getLogger(__name__)


@dataclass
class PracticeRecord:
    content: str
    mode: str
    success: bool
    duration_seconds: int
    finished_at: str = ""


class ActivityLog:
    """Finished practice sessions for the parent overview. Persists to disk.
    File: ~/.skriva/activity.json. Cleared only when the user resets it."""

    def __init__(self, file_path: Optional[Path] = None) -> None:
        self._file_path = file_path or Path.home() / ".skriva" / "activity.json"
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._records = self._load()

    def records(self) -> List[PracticeRecord]:
        return list(self._records)

    def record_session(self, event: SessionCompleted, content: str) -> PracticeRecord:
        """Store a completed session; duration is kept in whole seconds."""
        record = PracticeRecord(
            content=content,
            mode=event.mode,
            success=True,
            duration_seconds=int(round(event.total_duration_ms / 1000)),
            finished_at=datetime.now().isoformat(timespec="seconds"),
        )
        self._records.append(record)
        self._save()
        return record

    def completed_count(self, content: Optional[str] = None) -> int:
        return sum(
            1 for r in self._records if r.success and (content is None or r.content == content)
        )

    def total_practice_seconds(self) -> int:
        return sum(r.duration_seconds for r in self._records)

    def reset(self) -> None:
        """Clear all records."""
        self._records = []
        self._save()

    def _load(self) -> List[PracticeRecord]:
        if not self._file_path.exists():
            return []
        try:
            payload = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not load activity from %s: %s", self._file_path, e)
            return []
        if not isinstance(payload, dict):
            logger.warning("Ignoring activity in %s: expected a JSON object", self._file_path)
            return []

        records = []
        for value in payload.get("sessions", []):
            if not isinstance(value, dict):
                continue
            records.append(
                PracticeRecord(
                    content=str(value.get("content", "")),
                    mode=str(value.get("mode", "")),
                    success=bool(value.get("success", False)),
                    duration_seconds=int(value.get("duration_seconds", 0)),
                    finished_at=str(value.get("finished_at", "")),
                )
            )
        return records

    def _save(self) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"sessions": [asdict(r) for r in self._records]}
        try:
            self._file_path.write_text(
                json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8"
            )
        except OSError as e:
            logger.warning("Could not save activity to %s: %s", self._file_path, e)
