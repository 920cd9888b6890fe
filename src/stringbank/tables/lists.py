"""Display-ready (label, id) lists built from string tables.

Pure functions over already loaded tables: no I/O, no caching, no shared
state. Results feed dropdown and list population at UI call sites.

Rows are not pre-validated. A row with too few columns raises IndexError,
a non-integer id column raises ValueError.

Labels sort case- and accent-insensitively ("allemagne" < "États-Unis" <
"France"), with the raw text breaking ties.

Python 3.13+. External dependency: Babel (locale subtag parsing).
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import TYPE_CHECKING

from stringbank.constants import CSV_DELIMITER, LOCALE_COLUMNS
from stringbank.enums import RESERVED_BALLS
from stringbank.locale_utils import language_code, normalize_locale

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "ComboEntry",
    "label_sort_key",
    "locale_column",
    "locale_indexed_list",
    "simple_list",
    "filtered_list",
    "offset_list",
    "ball_list",
]


@dataclass(frozen=True, slots=True)
class ComboEntry:
    """A display label paired with a stable numeric identifier.

    Attributes:
        text: Human-readable label
        value: Domain identifier, independent of display order
    """

    text: str
    value: int


def _label(table: Sequence[str], index: int) -> str:
    # Negative indices would silently wrap around.
    if index < 0:
        msg = f"table index out of range: {index}"
        raise IndexError(msg)
    return table[index]


def label_sort_key(text: str) -> tuple[str, str]:
    """Collation key for display labels.

    Compares casefolded text with combining marks removed, then the raw
    text, so "é" sorts beside "e" and lowercase labels interleave with
    capitalized ones.
    """
    decomposed = unicodedata.normalize("NFKD", text.casefold())
    folded = "".join(c for c in decomposed if not unicodedata.combining(c))
    return folded, text


def _sorted(entries: Iterable[ComboEntry]) -> list[ComboEntry]:
    return sorted(entries, key=lambda entry: label_sort_key(entry.text))


def locale_column(locale: str, columns: Sequence[str] = LOCALE_COLUMNS) -> int:
    """Return the column holding a locale's labels in a locale-indexed row.

    Plain language codes are matched directly; longer tags ("en-US",
    "zh_Hans_CN") are reduced to their language subtag with Babel.

    Args:
        locale: Locale code
        columns: Language order of the label columns

    Returns:
        Column index (column 0 is the id, so the first language is 1)

    Raises:
        ValueError: If the locale is invalid or its language has no column
    """
    code = normalize_locale(locale).lower()
    if code not in columns:
        from babel import UnknownLocaleError  # noqa: PLC0415

        try:
            code = language_code(locale)
        except (UnknownLocaleError, ValueError) as e:
            msg = f"Unrecognized locale: '{locale}'"
            raise ValueError(msg) from e
    if code not in columns:
        msg = f"No label column for language '{code}' (columns: {', '.join(columns)})"
        raise ValueError(msg)
    return 1 + columns.index(code)


def locale_indexed_list(
    table: Sequence[str],
    locale: str,
    columns: Sequence[str] = LOCALE_COLUMNS,
) -> list[ComboEntry]:
    """Build a label-sorted list from a table with one label column per language.

    Rows after the header look like ``id,ja,en,fr,de,it,es,ko,zh``.

    Example:
        >>> table = ["id,ja,en", "1,日本,Japan", "2,米国,USA"]
        >>> [e.text for e in locale_indexed_list(table, "en")]
        ['Japan', 'USA']

    Args:
        table: Header line followed by locale-indexed rows
        locale: Locale whose column supplies the labels
        columns: Language order of the label columns

    Returns:
        Entries sorted ascending by label
    """
    column = locale_column(locale, columns)
    rows = (line.split(CSV_DELIMITER) for line in table[1:])
    return _sorted(ComboEntry(row[column], int(row[0])) for row in rows)


def simple_list(table: Sequence[str]) -> list[ComboEntry]:
    """Build an unsorted list from ``id,label`` rows, skipping the header.

    Args:
        table: Header line followed by ``id,label`` rows

    Returns:
        Entries in table order
    """
    rows = (line.split(CSV_DELIMITER) for line in table[1:])
    return [ComboEntry(row[1], int(row[0])) for row in rows]


def filtered_list(
    table: Sequence[str],
    *allowed_groups: Iterable[int],
) -> list[ComboEntry]:
    """Build a list of the allowed ids of an id-indexed table.

    Each group is sorted by label on its own; groups are concatenated in
    the order given. With no groups, every id of the table is allowed.

    Example:
        >>> [(e.text, e.value) for e in filtered_list(["Z", "A", "M"])]
        [('A', 1), ('M', 2), ('Z', 0)]

    Args:
        table: Id-indexed table (line N is the label of id N)
        *allowed_groups: Groups of ids to include

    Returns:
        Concatenation of the label-sorted groups
    """
    groups = allowed_groups or (range(len(table)),)
    result: list[ComboEntry] = []
    for group in groups:
        result.extend(_sorted(ComboEntry(_label(table, i), i) for i in group))
    return result


def offset_list(
    table: Sequence[str],
    offset: int,
    allowed: Iterable[int],
) -> list[ComboEntry]:
    """Build a label-sorted list for ids stored at an offset in the table.

    The label of id N is ``table[N - offset]``; the entry keeps id N.

    Args:
        table: Table whose line 0 holds the label of id ``offset``
        offset: First id covered by the table
        allowed: Ids to include

    Returns:
        Entries sorted ascending by label
    """
    return _sorted(ComboEntry(_label(table, i - offset), i) for i in allowed)


def ball_list(
    table: Sequence[str],
    display_indices: Sequence[int],
    values: Sequence[int],
) -> list[ComboEntry]:
    """Build a ball list: reserved balls first, the rest sorted by label.

    The Poke, Great and Ultra balls always lead, in that order, labelled from
    their own rows of the table. The remaining entries pair
    ``table[display_indices[i]]`` with ``values[i]`` and are sorted by label.
    The reserved prefix is never re-sorted with the remainder.

    Args:
        table: Ball name table
        display_indices: Table rows supplying the remaining labels
        values: Ball ids parallel to display_indices

    Returns:
        Reserved entries followed by the label-sorted remainder

    Raises:
        ValueError: If display_indices and values differ in length
    """
    reserved = [ComboEntry(_label(table, ball), int(ball)) for ball in RESERVED_BALLS]
    rest = _sorted(
        ComboEntry(_label(table, index), value)
        for index, value in zip(display_indices, values, strict=True)
    )
    return reserved + rest
