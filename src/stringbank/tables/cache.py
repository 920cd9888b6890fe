"""Thread-safe, lazily populated cache of string tables.

A string table is the line sequence of a bundled text resource. Position is
meaning: line N holds the name of entity N, with empty lines as gaps.

Architecture:
    - Tables are loaded on first request and kept for the cache's lifetime
      (no eviction, no invalidation; the bundle never changes).
    - Stored as tuples, handed out as fresh lists (defensive copy on every
      read), so callers can never mutate a cached table.
    - Inserts are serialized by a single Lock with a double-check inside
      it; the load runs under the lock, so concurrent first access to a
      key performs exactly one load.
    - Missing resources yield an empty table and are not stored; the
      locator memoizes the miss itself.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import TYPE_CHECKING

from stringbank.constants import DEFAULT_TEXT_FORMAT, LINE_SEPARATOR

if TYPE_CHECKING:
    from stringbank.resources.locator import ResourceLocator

__all__ = ["StringTableCache", "split_lines"]

logger = logging.getLogger(__name__)


def split_lines(text: str) -> tuple[str, ...]:
    """Split resource text into table lines.

    Splits on line-feed only and strips one trailing carriage-return per
    line, so LF and CRLF files produce the same table. A trailing newline
    yields a trailing empty line, as position is significant.

    Args:
        text: Decoded resource content

    Returns:
        Table lines
    """
    return tuple(line.removesuffix("\r") for line in text.split(LINE_SEPARATOR))


class StringTableCache:
    """Thread-safe cache of string tables keyed by resource key.

    Example:
        >>> cache = StringTableCache(locator)
        >>> species = cache.get_localized_table("species", "en")
        >>> species[25]
        'Pikachu'

    Attributes:
        text_format: Qualifier used by get_localized_table() (default: "text")
    """

    __slots__ = (
        "_hits",
        "_loads",
        "_locator",
        "_lock",
        "_misses",
        "_stats_lock",
        "_tables",
        "text_format",
    )

    def __init__(
        self,
        locator: ResourceLocator,
        *,
        text_format: str = DEFAULT_TEXT_FORMAT,
    ) -> None:
        """Initialize string table cache.

        Args:
            locator: Locator used to read resources on cache misses
            text_format: Qualifier prepended by get_localized_table()
        """
        self._locator = locator
        self.text_format = text_format
        self._tables: dict[str, tuple[str, ...]] = {}
        self._lock = Lock()
        self._stats_lock = Lock()
        self._hits = 0
        self._misses = 0
        self._loads = 0

    def _load(self, key: str) -> tuple[str, ...] | None:
        """Load and commit the table for key. Caller must hold self._lock."""
        text = self._locator.read_text(key)
        if text is None:
            logger.debug("No resource for table '%s'", key)
            return None
        table = split_lines(text)
        self._tables[key] = table
        with self._stats_lock:
            self._loads += 1
        logger.debug("Loaded table '%s' (%d lines)", key, len(table))
        return table

    def get_table(self, key: str) -> list[str]:
        """Get the string table for a resource key.

        Thread-safe. Returns a new list on every call.

        Args:
            key: Resource key (e.g., "text_species_en", "legality_fr")

        Returns:
            Table lines; empty if the bundle has no resource for key

        Raises:
            ResourceReadError: If the resource exists but cannot be read
        """
        table = self._tables.get(key)
        if table is not None:
            with self._stats_lock:
                self._hits += 1
            return list(table)

        with self._stats_lock:
            self._misses += 1

        with self._lock:
            # Check again: another thread may have committed while we waited.
            table = self._tables.get(key)
            if table is None:
                table = self._load(key)
        return list(table) if table is not None else []

    def get_localized_table(
        self,
        category: str,
        locale: str,
        fmt: str | None = None,
    ) -> list[str]:
        """Get the table for a category in a locale.

        Sugar for ``get_table(f"{fmt}_{category}_{locale}")``.

        Args:
            category: Table category (e.g., "species", "items")
            locale: Locale code as used in resource names (e.g., "en", "ja")
            fmt: Format qualifier (default: the cache's text_format)

        Returns:
            Table lines; empty if the locale file is absent
        """
        return self.get_table(f"{fmt or self.text_format}_{category}_{locale}")

    def get_stats(self) -> dict[str, int | float]:
        """Get cache statistics.

        Thread-safe.

        Returns:
            Dict with keys:
            - size (int): Number of cached tables
            - hits (int): Reads served from the cache
            - misses (int): Reads that went to the locator
            - loads (int): Tables loaded and committed
            - hit_rate (float): Hit rate as percentage (0.0-100.0)
        """
        with self._stats_lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0
            return {
                "size": len(self._tables),
                "hits": self._hits,
                "misses": self._misses,
                "loads": self._loads,
                "hit_rate": round(hit_rate, 2),
            }

    def keys(self) -> list[str]:
        """Return the keys of all cached tables (does not wait for loads)."""
        return list(self._tables)

    def __contains__(self, key: object) -> bool:
        """Check whether a table is cached (does not trigger a load)."""
        return key in self._tables

    def __len__(self) -> int:
        """Return the number of cached tables."""
        return len(self._tables)
