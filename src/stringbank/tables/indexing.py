"""Sparse id-indexed arrays from CSV-like string tables.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from stringbank.constants import CSV_DELIMITER
from stringbank.errors import TableFormatError

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = ["indexed_from_csv"]


def _parse_id(line: str) -> int:
    field = line.split(CSV_DELIMITER, 1)[0]
    try:
        return int(field)
    except ValueError as e:
        msg = f"Expected integer id in leading field, got {field!r}"
        raise TableFormatError(msg, line=line) from e


def indexed_from_csv(raw_lines: Sequence[str]) -> list[str]:
    """Build a dense array indexed by each row's leading integer id.

    The first line is a header and is skipped. Every following line is
    ``id,value``; ``value`` is stored at index ``id`` and indices no row
    references stay ``""``.

    The array is sized from the *last* line's id (``last_id + 1``), so rows
    must be sorted ascending by id. An unsorted table whose largest id is
    not last fails with IndexError rather than being resized.

    Example:
        >>> indexed_from_csv(["header", "2,Foo", "0,Bar"])
        ['Bar', '', 'Foo']

    Args:
        raw_lines: Header line followed by ``id,value`` rows

    Returns:
        Array of length ``last_id + 1``

    Raises:
        TableFormatError: If a leading field is not an integer
        IndexError: If raw_lines is empty, a row has no value field, or an
            id falls outside the array sized from the last line
    """
    size = _parse_id(raw_lines[-1]) + 1
    result = [""] * max(size, 0)
    for line in raw_lines[1:]:
        fields = line.split(CSV_DELIMITER)
        index = _parse_id(line)
        if not 0 <= index < len(result):
            msg = f"id {index} outside table of {len(result)} entries sized from the last line"
            raise IndexError(msg)
        result[index] = fields[1]
    return result
