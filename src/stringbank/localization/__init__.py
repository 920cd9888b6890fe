"""Localization of translatable objects from translation line sets.

Submodules:
    properties - PropertyAccessor protocol, AttributeAccessor, MappingAccessor
    merger     - dump, reconcile, apply and the bundled-file helpers

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from stringbank.localization.merger import (
    apply,
    dump,
    format_line,
    get_localization,
    load_and_apply,
    property_names,
    reconcile,
    set_localization,
    split_line,
)
from stringbank.localization.properties import (
    AttributeAccessor,
    MappingAccessor,
    PropertyAccessor,
)

__all__ = [
    # Accessors
    "PropertyAccessor",
    "AttributeAccessor",
    "MappingAccessor",
    # Line format
    "format_line",
    "split_line",
    "property_names",
    # Merge
    "dump",
    "reconcile",
    "get_localization",
    # Apply
    "apply",
    "load_and_apply",
    "set_localization",
]
