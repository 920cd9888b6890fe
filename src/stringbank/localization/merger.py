"""Translation line sets: dump, reconcile, and apply.

A translation file is a line set of ``PropertyName = Value`` entries, one
per property of a translatable object, in declaration order. The merger
produces such line sets from live objects, reconciles them with a
previously saved file so human translations survive property additions
and removals, and applies line sets back onto objects.

Line format:
    Split on the first " = " only; the value may contain the separator.
    Lines without a separator are skipped, never fatal.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from stringbank.constants import LOG_TRUNCATE_VALUE, TRANSLATION_SEPARATOR
from stringbank.errors import PropertyAccessError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from stringbank.localization.properties import PropertyAccessor
    from stringbank.tables.cache import StringTableCache

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Line format
    "format_line",
    "split_line",
    "property_names",
    # Merge operations
    "dump",
    "reconcile",
    "get_localization",
    # Apply operations
    "apply",
    "load_and_apply",
    "set_localization",
]

logger = logging.getLogger(__name__)


def format_line(name: str, value: str) -> str:
    """Format a translation line: ``f"{name} = {value}"``."""
    return f"{name}{TRANSLATION_SEPARATOR}{value}"


def split_line(line: str) -> tuple[str, str] | None:
    """Split a translation line into property name and value.

    Args:
        line: Translation line

    Returns:
        (name, value), or None if the line has no separator
    """
    name, sep, value = line.partition(TRANSLATION_SEPARATOR)
    if not sep:
        return None
    return name, value


def property_names(lines: Iterable[str]) -> list[str | None]:
    """Return the property name of each line (None where malformed), positionally."""
    return [parts[0] if (parts := split_line(line)) is not None else None for line in lines]


def dump(accessor: PropertyAccessor) -> list[str]:
    """Dump the current values of a translatable object as translation lines.

    Args:
        accessor: Target's property accessor

    Returns:
        One ``name = value`` line per declared property, in declaration order
    """
    return [format_line(name, accessor.get_value(name)) for name in accessor.list_names()]


def reconcile(
    current_lines: Sequence[str],
    saved_lines: Sequence[str] | None = None,
) -> list[str]:
    """Merge current translation lines with a previously saved line set.

    For each current line, the saved line for the same property replaces it
    if one exists (keeping a translator's edited value); otherwise the
    current line is kept. The result always has exactly one line per current
    line, in current order: new properties are kept, retired ones dropped.
    If the saved set names a property twice, the first occurrence wins.

    Example:
        >>> reconcile(["A = 1", "B = 2"], ["A = 99"])
        ['A = 99', 'B = 2']

    Args:
        current_lines: Lines dumped from the live object
        saved_lines: Previously saved lines, or None on first run

    Returns:
        Reconciled lines
    """
    if saved_lines is None:
        return list(current_lines)

    saved_by_name: dict[str, str] = {}
    for line in saved_lines:
        parts = split_line(line)
        if parts is not None:
            saved_by_name.setdefault(parts[0], line)

    result: list[str] = []
    for line in current_lines:
        parts = split_line(line)
        saved = saved_by_name.get(parts[0]) if parts is not None else None
        result.append(saved if saved is not None else line)
    return result


def get_localization(
    accessor: PropertyAccessor,
    saved_lines: Sequence[str] | None = None,
) -> list[str]:
    """Dump a translatable object and reconcile it with saved lines.

    This is the line set to write back to the object's translation file.

    Args:
        accessor: Target's property accessor
        saved_lines: Existing translation file lines, if any

    Returns:
        Reconciled lines
    """
    return reconcile(dump(accessor), saved_lines)


def _truncate(value: str) -> str:
    if len(value) <= LOG_TRUNCATE_VALUE:
        return value
    return value[:LOG_TRUNCATE_VALUE] + "..."


def apply(accessor: PropertyAccessor, lines: Iterable[str | None] | None) -> int:
    """Apply translation lines to a translatable object.

    Lines without a separator and None entries are skipped. A property the
    target does not have, or refuses, is logged at WARNING and skipped; the
    remaining lines are still applied.

    Args:
        accessor: Target's property accessor
        lines: Translation lines, or None (no-op)

    Returns:
        Number of properties set
    """
    if lines is None:
        return 0
    applied = 0
    for line in lines:
        if line is None:
            continue
        parts = split_line(line)
        if parts is None:
            continue
        name, value = parts
        try:
            accessor.set_value(name, value)
        except PropertyAccessError as e:
            logger.warning(
                "Property not present: %s || Value written: %s", name, _truncate(value)
            )
            logger.debug("  - %s: %s", type(e).__name__, e)
            continue
        applied += 1
    return applied


def load_and_apply(
    accessor: PropertyAccessor,
    cache: StringTableCache,
    file_prefix: str,
    locale_code: str,
) -> int:
    """Apply the bundled translation file ``{file_prefix}_{locale_code}``.

    Example:
        >>> load_and_apply(accessor, cache, "legality", "fr")
        # Applies the bundled legality_fr.txt

    Args:
        accessor: Target's property accessor
        cache: Table cache to read the translation file through
        file_prefix: Translation file prefix (e.g., "legality")
        locale_code: Locale code (e.g., "fr")

    Returns:
        Number of properties set (0 if the file is not bundled)
    """
    key = f"{file_prefix}_{locale_code}"
    lines = cache.get_table(key)
    if not lines:
        logger.warning("No translation file '%s' for %s", key, accessor.type_name)
    return apply(accessor, lines)


def set_localization(
    accessor: PropertyAccessor,
    cache: StringTableCache,
    locale_code: str,
) -> int:
    """Apply the bundled translation file named after the target's type.

    ``{type_name}_{locale_code}``, e.g. ``LegalityStrings_de``.

    Args:
        accessor: Target's property accessor
        cache: Table cache to read the translation file through
        locale_code: Locale code

    Returns:
        Number of properties set
    """
    return load_and_apply(accessor, cache, accessor.type_name, locale_code)
