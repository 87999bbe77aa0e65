from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from skriva.core.composition import PracticeMode
from skriva.core.glyphs import alphabet


class LessonFileError(ValueError):
    """Raised for a lesson file that cannot be loaded."""


@dataclass(frozen=True)
class Lesson:
    key: str
    title: str
    mode: PracticeMode
    items: List[str]


class LessonRepository:
    def __init__(self, base_dir: Optional[Path] = None) -> None:
        if base_dir is None:
            base_dir = Path(__file__).resolve().parent.parent / "data" / "lessons"
        self._base_dir = base_dir
        self._lessons = self._load_lessons()

    def all(self) -> List[Lesson]:
        return list(self._lessons.values())

    def get(self, key: str) -> Lesson:
        return self._lessons[key]

    def _load_lessons(self) -> Dict[str, Lesson]:
        base_dir = self._base_dir
        if not base_dir.exists():
            raise FileNotFoundError(f"Lessons directory not found: {base_dir}")

        lessons: Dict[str, Lesson] = {}

        def _sort_key(p: Path) -> tuple[int, str]:
            m = re.match(r"^lesson(\d+)$", p.stem)
            if m:
                return (int(m.group(1)), p.stem)
            return (10**9, p.stem)

        for lesson_path in sorted(base_dir.glob("lesson*.yaml"), key=_sort_key):
            key = lesson_path.stem
            raw = yaml.safe_load(lesson_path.read_text(encoding="utf-8"))
            if not raw or not isinstance(raw, dict):
                raise LessonFileError(f"{lesson_path.name}: expected YAML with 'title', 'mode' and 'content'")
            title = raw.get("title")
            if not title or not isinstance(title, str):
                raise LessonFileError(f"{lesson_path.name}: missing or invalid 'title'")
            try:
                mode = PracticeMode(raw.get("mode"))
            except ValueError:
                raise LessonFileError(f"{lesson_path.name}: unknown mode {raw.get('mode')!r}") from None
            content = raw.get("content")
            if raw.get("alphabet"):
                if content is not None:
                    raise LessonFileError(f"{lesson_path.name}: use either 'alphabet' or 'content'")
                items = alphabet()
            elif content is None:
                raise LessonFileError(f"{lesson_path.name}: missing 'content'")
            elif isinstance(content, list):
                items = [str(item).strip() for item in content if str(item).strip()]
            else:
                # allow content as multiline string
                text = str(content).strip()
                items = [line.strip() for line in text.splitlines() if line.strip()]
            if not items:
                raise LessonFileError(f"{lesson_path.name}: 'content' has no items")
            lessons[key] = Lesson(key=key, title=title.strip(), mode=mode, items=items)

        if not lessons:
            raise LessonFileError("No lesson files (lesson*.yaml) found in data/lessons")
        return lessons
