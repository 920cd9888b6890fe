"""String tables: caching, sparse indexing, and display list building.

Submodules:
    cache    - StringTableCache (thread-safe lazy table cache)
    indexing - indexed_from_csv (sparse id-indexed arrays)
    lists    - ComboEntry and the (label, id) list builders

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from stringbank.tables.cache import StringTableCache, split_lines
from stringbank.tables.indexing import indexed_from_csv
from stringbank.tables.lists import (
    ComboEntry,
    ball_list,
    label_sort_key,
    filtered_list,
    locale_column,
    locale_indexed_list,
    offset_list,
    simple_list,
)

__all__ = [
    # Cache
    "StringTableCache",
    "split_lines",
    # Indexing
    "indexed_from_csv",
    # List builders
    "ComboEntry",
    "label_sort_key",
    "locale_column",
    "locale_indexed_list",
    "simple_list",
    "filtered_list",
    "offset_list",
    "ball_list",
]
