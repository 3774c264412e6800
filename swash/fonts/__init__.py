"""Font variants and font construction for swash.

This subpackage provides:
- FontVariant enumerations with bold text mappings and cascade lists
- Base size selection for dynamic type
- FontFactory, which builds fonts through a backend
"""

from swash.fonts.dynamic import DynamicSize, resolve_dynamic_size
from swash.fonts.factory import FailurePolicy, FontFactory
from swash.fonts.variant import (
    CascadeEntry,
    FontTraits,
    FontVariant,
    apply_bold_mapping,
    resolve_cascade,
    resolve_name,
)

__all__ = [
    "CascadeEntry",
    "DynamicSize",
    "FailurePolicy",
    "FontFactory",
    "FontTraits",
    "FontVariant",
    "apply_bold_mapping",
    "resolve_cascade",
    "resolve_dynamic_size",
    "resolve_name",
]
