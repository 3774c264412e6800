"""Generate FontVariant declarations for installed fonts.

Typing out every face of a family by hand is error prone. The generated
source can be pasted into an application and trimmed to the faces it uses::

    class Avenir(FontVariant):
        BLACK = "Avenir-Black"
        BOOK = "Avenir-Book"
"""

from __future__ import annotations

import keyword
import logging
import re
from collections.abc import Mapping, Sequence

from swash.backends.base import FontBackend

log = logging.getLogger(__name__)

_NON_WORD = re.compile(r"[^0-9A-Za-z]+")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def class_name_for(family: str) -> str:
    """Turn a family name like ``Helvetica Neue`` into ``HelveticaNeue``."""
    parts = [p for p in _NON_WORD.split(family) if p]
    name = "".join(p[:1].upper() + p[1:] for p in parts) or "Font"
    if name[0].isdigit() or keyword.iskeyword(name):
        name = f"Font{name}"
    return name


def member_name_for(font_name: str, family: str) -> str:
    """Derive an enum member name from a PostScript font name.

    The family prefix is stripped (``Avenir-HeavyOblique`` becomes
    ``HEAVY_OBLIQUE``); a name that is only the family becomes ``REGULAR``.
    """
    squashed_family = _NON_WORD.sub("", family)
    style = font_name
    if "-" in font_name:
        style = font_name.split("-", 1)[1]
    elif _NON_WORD.sub("", font_name) == squashed_family:
        style = "Regular"
    style = _CAMEL_BOUNDARY.sub("_", style)
    member = "_".join(p for p in _NON_WORD.split(style) if p).upper() or "REGULAR"
    if member[0].isdigit():
        member = f"F_{member}"
    return member


def _unique(name: str, taken: set[str]) -> str:
    candidate = name
    suffix = 2
    while candidate in taken:
        candidate = f"{name}_{suffix}"
        suffix += 1
    taken.add(candidate)
    return candidate


def generate_boilerplate(
    fonts: Mapping[str, Sequence[str]], family: str | None = None
) -> str:
    """Render one FontVariant subclass per family.

    Args:
        fonts: Font names grouped by family, as returned by
            ``FontBackend.available_fonts()``.
        family: Only render families whose name contains this text
            (case insensitive).

    Returns:
        Python source, empty when no family matches.
    """
    blocks: list[str] = []
    for family_name in sorted(fonts):
        if family and family.lower() not in family_name.lower():
            continue
        names = sorted(set(fonts[family_name]))
        if not names:
            continue
        taken: set[str] = set()
        lines = [f"class {class_name_for(family_name)}(FontVariant):"]
        for font_name in names:
            member = _unique(member_name_for(font_name, family_name), taken)
            lines.append(f"    {member} = {font_name!r}")
        blocks.append("\n".join(lines))
    return "\n\n\n".join(blocks) + ("\n" if blocks else "")


def log_boilerplate(backend: FontBackend, family: str | None = None) -> str:
    """Log generated declarations for every font ``backend`` knows about."""
    source = generate_boilerplate(backend.available_fonts(), family=family)
    if source:
        log.info("FontVariant boilerplate:\n%s", source)
    else:
        log.info("No fonts matched for boilerplate generation")
    return source
