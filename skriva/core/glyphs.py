from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from skriva.core.geometry import Point, Stroke, arc, curve, line

logger = logging.getLogger(__name__)

TABLES = ("uppercase", "lowercase", "punctuation")

ALPHABET = tuple("ABCDEFGHIJKLMNOPQRSTUVWXYZÅÄÖ")

_PRIMITIVES = {
    "line": (line, 4),
    "curve": (curve, 6),
    "arc": (arc, 5),
}


class GlyphTableError(ValueError):
    """Raised when a glyph table cannot be turned into strokes."""


class GlyphLibrary:
    """Catalogue of characters and their ordered strokes.

    Every stroke is sampled once when the library is built, so repeated
    lookups hand out the very same immutable objects.
    """

    def __init__(self, base_dir: Optional[Path] = None) -> None:
        if base_dir is None:
            base_dir = Path(__file__).resolve().parent.parent / "data" / "glyphs"
        self._base_dir = base_dir
        self._glyphs = self._load_tables()
        self._default = next(iter(self._glyphs))

    @property
    def default_character(self) -> str:
        return self._default

    def characters(self) -> List[str]:
        return list(self._glyphs)

    def has_glyph(self, character: str) -> bool:
        return character in self._glyphs

    def get_strokes(self, character: str) -> Tuple[Stroke, ...]:
        """Strokes for ``character`` (case-sensitive).

        Unknown characters get the default glyph instead of an error.
        """
        strokes = self._glyphs.get(character)
        if strokes is None:
            logger.warning(
                "No glyph for %r, falling back to %r", character, self._default
            )
            return self._glyphs[self._default]
        return strokes

    def _load_tables(self) -> Dict[str, Tuple[Stroke, ...]]:
        if not self._base_dir.exists():
            raise FileNotFoundError(f"Glyph directory not found: {self._base_dir}")

        glyphs: Dict[str, Tuple[Stroke, ...]] = {}
        for name in TABLES:
            table_path = self._base_dir / f"{name}.yaml"
            if not table_path.exists():
                raise FileNotFoundError(f"Glyph table not found: {table_path}")
            raw = yaml.safe_load(table_path.read_text(encoding="utf-8"))
            if not raw or not isinstance(raw, dict) or not isinstance(raw.get("glyphs"), dict):
                raise GlyphTableError(f"{table_path.name}: expected YAML with a 'glyphs' mapping")
            for key, strokes in raw["glyphs"].items():
                character = str(key)
                if character in glyphs:
                    raise GlyphTableError(f"{table_path.name}: {character!r} is defined twice")
                glyphs[character] = _build_glyph(table_path.name, character, strokes)

        if not glyphs:
            raise GlyphTableError(f"No glyphs found in {self._base_dir}")
        logger.debug("Loaded %d glyphs from %s", len(glyphs), self._base_dir)
        return glyphs


def alphabet() -> List[str]:
    """Letters offered by the letter lessons, in practice order."""
    return list(ALPHABET)


def _build_glyph(source: str, character: str, strokes: Any) -> Tuple[Stroke, ...]:
    if not isinstance(strokes, list) or not strokes:
        raise GlyphTableError(f"{source}: {character!r} needs a non-empty list of strokes")
    built = []
    for i, spec in enumerate(strokes):
        where = f"{source}: {character!r} stroke {i}"
        if isinstance(spec, dict) and "segments" in spec:
            segments = spec["segments"]
            if not isinstance(segments, list) or not segments:
                raise GlyphTableError(f"{where}: 'segments' must be a non-empty list")
            points = [_sample(where, seg) for seg in segments]
        else:
            points = [_sample(where, spec)]
        try:
            built.append(Stroke.join(points))
        except ValueError as e:
            raise GlyphTableError(f"{where}: {e}") from e
    return tuple(built)


def _sample(where: str, spec: Any) -> Tuple[Point, ...]:
    if not isinstance(spec, dict):
        raise GlyphTableError(f"{where}: expected a primitive mapping, got {spec!r}")
    kinds = [k for k in spec if k in _PRIMITIVES]
    if len(kinds) != 1:
        raise GlyphTableError(f"{where}: expected exactly one of {sorted(_PRIMITIVES)}")
    kind = kinds[0]
    make, arity = _PRIMITIVES[kind]
    args = spec[kind]
    if not isinstance(args, list) or len(args) != arity:
        raise GlyphTableError(f"{where}: '{kind}' takes {arity} numbers")
    try:
        numbers = [float(a) for a in args]
        if "points" in spec:
            return make(*numbers, points=int(spec["points"]))
        return make(*numbers)
    except (TypeError, ValueError) as e:
        raise GlyphTableError(f"{where}: {e}") from e
