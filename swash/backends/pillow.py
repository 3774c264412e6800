"""Font backend built on Pillow, with a fontTools name index.

Fonts are requested by PostScript name (``Avenir-Roman``) or full name
(``Avenir Roman``). The index is built lazily from the platform font
directories plus any extra directories or files registered by the caller.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from fontTools.ttLib import TTCollection, TTFont, TTLibError
from PIL import ImageFont

log = logging.getLogger(__name__)

FONT_SUFFIXES = {".ttf", ".otf", ".ttc", ".otc"}
_COLLECTION_SUFFIXES = {".ttc", ".otc"}

# OpenType name table IDs
_NAME_FAMILY = 1
_NAME_SUBFAMILY = 2
_NAME_FULL = 4
_NAME_POSTSCRIPT = 6
_NAME_TYPO_FAMILY = 16
_NAME_TYPO_SUBFAMILY = 17


@dataclass(frozen=True)
class FaceRecord:
    """Location and names of one face inside a font file."""

    path: Path
    index: int
    postscript_name: str
    family: str
    style: str
    full_name: str | None = None


def default_font_dirs() -> list[Path]:
    """Return the existing system and user font directories for this platform."""
    home = Path.home()
    if sys.platform == "darwin":
        candidates = [
            Path("/System/Library/Fonts"),
            Path("/Library/Fonts"),
            home / "Library" / "Fonts",
        ]
    elif sys.platform.startswith("win"):
        windir = Path(os.environ.get("WINDIR", r"C:\Windows"))
        candidates = [windir / "Fonts"]
        local = os.environ.get("LOCALAPPDATA")
        if local:
            candidates.append(Path(local) / "Microsoft" / "Windows" / "Fonts")
    else:
        candidates = [
            Path("/usr/share/fonts"),
            Path("/usr/local/share/fonts"),
            home / ".fonts",
            home / ".local" / "share" / "fonts",
        ]
    return [d for d in candidates if d.is_dir()]


def _face_record(path: Path, ttfont: TTFont, index: int) -> FaceRecord | None:
    name_table = ttfont["name"]
    postscript = name_table.getDebugName(_NAME_POSTSCRIPT)
    if not postscript:
        return None
    family = (
        name_table.getDebugName(_NAME_TYPO_FAMILY)
        or name_table.getDebugName(_NAME_FAMILY)
        or postscript
    )
    style = (
        name_table.getDebugName(_NAME_TYPO_SUBFAMILY)
        or name_table.getDebugName(_NAME_SUBFAMILY)
        or "Regular"
    )
    return FaceRecord(
        path=path,
        index=index,
        postscript_name=postscript,
        family=family,
        style=style,
        full_name=name_table.getDebugName(_NAME_FULL),
    )


def read_faces(path: Path) -> list[FaceRecord]:
    """Read the names of every face in a font file.

    Unreadable files yield an empty list.
    """
    records: list[FaceRecord] = []
    try:
        if path.suffix.lower() in _COLLECTION_SUFFIXES:
            with TTCollection(str(path), lazy=True) as collection:
                for index, ttfont in enumerate(collection.fonts):
                    record = _face_record(path, ttfont, index)
                    if record is not None:
                        records.append(record)
        else:
            with TTFont(str(path), lazy=True) as ttfont:
                record = _face_record(path, ttfont, 0)
                if record is not None:
                    records.append(record)
    except (TTLibError, OSError, KeyError) as e:
        log.debug("Skipping unreadable font %s: %s", path, e)
        return []
    return records


class PillowFontBackend:
    """Load fonts by name with ``PIL.ImageFont``."""

    def __init__(
        self,
        font_dirs: Iterable[Path] | None = None,
        extra_dirs: Iterable[Path] = (),
        include_system: bool = True,
    ) -> None:
        dirs = list(font_dirs) if font_dirs is not None else []
        if include_system and font_dirs is None:
            dirs.extend(default_font_dirs())
        dirs.extend(Path(d) for d in extra_dirs)
        self.font_dirs = dirs
        self._index: dict[str, FaceRecord] | None = None
        self._registered: list[FaceRecord] = []

    def register_file(self, path: Path) -> list[FaceRecord]:
        """Add the faces of a single font file to the index."""
        records = read_faces(Path(path))
        self._registered.extend(records)
        if self._index is not None:
            self._add_to_index(self._index, records)
        return records

    @staticmethod
    def _add_to_index(index: dict[str, FaceRecord], records: Iterable[FaceRecord]) -> None:
        for record in records:
            index.setdefault(record.postscript_name, record)
            if record.full_name:
                index.setdefault(record.full_name, record)

    def _build_index(self) -> dict[str, FaceRecord]:
        index: dict[str, FaceRecord] = {}
        count = 0
        for font_dir in self.font_dirs:
            if not font_dir.is_dir():
                log.warning("Font directory does not exist: %s", font_dir)
                continue
            for path in sorted(font_dir.rglob("*")):
                if path.suffix.lower() not in FONT_SUFFIXES or not path.is_file():
                    continue
                records = read_faces(path)
                count += len(records)
                self._add_to_index(index, records)
        self._add_to_index(index, self._registered)
        log.debug("Indexed %d font faces from %d directories", count, len(self.font_dirs))
        return index

    @property
    def index(self) -> dict[str, FaceRecord]:
        if self._index is None:
            self._index = self._build_index()
        return self._index

    def find(self, name: str) -> FaceRecord | None:
        return self.index.get(name)

    def load(self, name: str, size: float) -> ImageFont.FreeTypeFont | None:
        record = self.find(name)
        if record is None:
            return None
        try:
            return ImageFont.truetype(str(record.path), size=size, index=record.index)
        except OSError as e:
            log.warning("Pillow could not open %s (%s): %s", name, record.path, e)
            return None

    def system_font(self, size: float) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
        return ImageFont.load_default(size=size)

    def available_fonts(self) -> dict[str, list[str]]:
        families: dict[str, set[str]] = {}
        for record in self.index.values():
            families.setdefault(record.family, set()).add(record.postscript_name)
        return {family: sorted(names) for family, names in sorted(families.items())}

    def faces(self) -> list[FaceRecord]:
        """Return every indexed face once, ordered by family then name."""
        unique = {record.postscript_name: record for record in self.index.values()}
        return sorted(unique.values(), key=lambda r: (r.family, r.postscript_name))
