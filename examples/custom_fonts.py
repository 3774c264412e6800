#!/usr/bin/env python3
"""Declare font families and build fonts at literal and dynamic sizes.

Run with a directory containing the Avenir and Damascus fonts:

    python examples/custom_fonts.py ~/Library/Fonts --bold
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from swash import (
    CascadeEntry,
    FailurePolicy,
    FontFactory,
    FontTraits,
    FontVariant,
    PlatformClass,
    StaticAccessibility,
    TextStyle,
)
from swash.backends.pillow import PillowFontBackend


class Avenir(FontVariant):
    ROMAN = "Avenir-Roman"
    MEDIUM = "Avenir-Medium"
    HEAVY = "Avenir-Heavy"
    BLACK = "Avenir-Black"

    @classmethod
    def preferred(cls, text_style: TextStyle) -> Avenir:
        if text_style in (TextStyle.TITLE1, TextStyle.LARGE_TITLE):
            return cls.HEAVY
        return cls.ROMAN


class Damascus(FontVariant):
    REGULAR = "Damascus"
    BOLD = "DamascusBold"


AVENIR = FontTraits(
    bold_mapping={
        Avenir.ROMAN: Avenir.HEAVY,
        Avenir.MEDIUM: Avenir.HEAVY,
        Avenir.HEAVY: Avenir.BLACK,
    },
    cascade_list=[CascadeEntry(Damascus.REGULAR, Damascus.BOLD)],
)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("font_dir", type=Path, nargs="?", help="Extra font directory")
    parser.add_argument("--bold", action="store_true", help="Simulate bold text")
    parser.add_argument("--platform", choices=[p.value for p in PlatformClass], default="phone")
    parser.add_argument("--strict", action="store_true", help="Fail on missing fonts")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    backend = PillowFontBackend(extra_dirs=[args.font_dir] if args.font_dir else ())
    factory = FontFactory(
        backend,
        StaticAccessibility(bold_text=args.bold),
        platform=PlatformClass(args.platform),
        policy=FailurePolicy.STRICT if args.strict else FailurePolicy.FALLBACK,
    )
    factory.register(Avenir, AVENIR)

    font = factory.of_size(Avenir.ROMAN, 23)
    print(f"of_size: {font.name or '<system>'} @ {font.size:g} cascade={list(font.cascade)}")

    for style in (TextStyle.BODY, TextStyle.TITLE1, TextStyle.LARGE_TITLE):
        font = factory.font_for_style(Avenir, style, max_size=30)
        print(f"{style.value}: {font.name or '<system>'} @ {font.size:g}")


if __name__ == "__main__":
    main()
