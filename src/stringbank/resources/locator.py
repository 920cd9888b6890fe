"""Resource locator: logical resource keys to bundle entries.

Maps a key such as ``text_species_en`` to the bundle entry that holds it
(``<namespace>.text.text_species_en.txt``) and reads entries fully into
memory.

Architecture:
    - The store's entry names are snapshotted once at construction; the
      entry set of a bundle is fixed for the process lifetime.
    - Key -> entry resolution is memoized permanently, including misses.
    - A single Lock guards memo inserts; a re-check under the lock
      guarantees one committed value per key.
    - Streams are opened in ``with`` blocks and closed on every exit path.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import TYPE_CHECKING

from stringbank.constants import DEFAULT_ENCODING, TEXT_SUFFIX
from stringbank.enums import ResourceKind
from stringbank.errors import ResourceNotFoundError, ResourceReadError

if TYPE_CHECKING:
    from stringbank.resources.store import ResourceStore

__all__ = ["ResourceLocator"]

logger = logging.getLogger(__name__)


class ResourceLocator:
    """Resolves resource keys to bundle entries and reads their content.

    Thread Safety:
        All methods are thread-safe. Concurrent first lookups of the same
        key may both scan the entry names, but only one result is committed
        and both callers observe it.

    Example:
        >>> locator = ResourceLocator(PackageResourceStore("stringbank.data"), "stringbank.data")
        >>> locator.locate("text_species_en")
        'stringbank.data.text.text_species_en.txt'
        >>> locator.locate("text_species_xx") is None
        True

    Attributes:
        namespace: Prefix of every entry name this locator resolves
        encoding: Text encoding used by read_text()
    """

    __slots__ = ("_entry_names", "_lock", "_name_map", "_store", "encoding", "namespace")

    def __init__(
        self,
        store: ResourceStore,
        namespace: str,
        *,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        """Initialize resource locator.

        Args:
            store: Bundle store to resolve against
            namespace: Entry name prefix (e.g., "stringbank.data")
            encoding: Text encoding of text entries (default: utf-8)
        """
        self._store = store
        self.namespace = namespace
        self.encoding = encoding
        # Sorted shortest-first so the tightest suffix match wins.
        self._entry_names: tuple[str, ...] = tuple(
            sorted(store.list_entry_names(), key=lambda n: (len(n), n))
        )
        self._name_map: dict[str, str | None] = {}
        self._lock = Lock()

    @property
    def text_prefix(self) -> str:
        """Prefix shared by all text entries: ``<namespace>.text.``."""
        return f"{self.namespace}.{ResourceKind.TEXT}."

    @property
    def byte_prefix(self) -> str:
        """Prefix shared by all binary entries: ``<namespace>.byte.``."""
        return f"{self.namespace}.{ResourceKind.BYTE}."

    def _scan(self, key: str) -> str | None:
        prefix = self.text_prefix
        suffix = f"{key}{TEXT_SUFFIX}".casefold()
        for name in self._entry_names:
            if name.startswith(prefix) and name.casefold().endswith(suffix):
                return name
        return None

    def locate(self, key: str) -> str | None:
        """Resolve a resource key to its text entry name.

        The prefix match is case-sensitive, the ``<key>.txt`` suffix match is
        case-insensitive. The first call for a key scans all entry names;
        later calls are a dict lookup.

        Args:
            key: Resource key (e.g., "text_species_en")

        Returns:
            Entry name, or None if the bundle has no entry for the key
        """
        try:
            return self._name_map[key]
        except KeyError:
            pass

        found = self._scan(key)
        with self._lock:
            if key not in self._name_map:
                self._name_map[key] = found
                logger.debug("Mapped resource key '%s' -> %s", key, found)
            return self._name_map[key]

    def _read_entry(self, name: str) -> bytes | None:
        try:
            stream = self._store.open_entry(name)
            if stream is None:
                return None
            with stream:
                return stream.read()
        except OSError as e:
            logger.error("Failed to read resource %s: %s", name, e)
            msg = f"Failed to read resource '{name}': {e}"
            raise ResourceReadError(msg, entry_name=name) from e

    def read_text(self, key: str) -> str | None:
        """Read the text entry for a resource key.

        Args:
            key: Resource key (e.g., "text_species_en")

        Returns:
            Decoded entry content, or None if the key maps to no entry

        Raises:
            ResourceReadError: If the entry exists but cannot be read or decoded
        """
        name = self.locate(key)
        if name is None:
            return None
        data = self._read_entry(name)
        if data is None:
            return None
        try:
            return data.decode(self.encoding)
        except UnicodeDecodeError as e:
            logger.error("Failed to decode resource %s as %s: %s", name, self.encoding, e)
            msg = f"Resource '{name}' is not valid {self.encoding}: {e}"
            raise ResourceReadError(msg, entry_name=name) from e

    def read_bytes(self, name: str) -> bytes:
        """Read a binary entry by its short name.

        Args:
            name: Name below the byte prefix (e.g., "lvlmove_sm.pkl")

        Returns:
            Entry content

        Raises:
            ResourceNotFoundError: If the bundle has no such binary entry
            ResourceReadError: If the entry cannot be read
        """
        entry_name = f"{self.byte_prefix}{name}"
        data = self._read_entry(entry_name)
        if data is None:
            msg = f"Binary resource not found: '{entry_name}'"
            raise ResourceNotFoundError(msg, entry_name=entry_name)
        return data

    def cached_names(self) -> dict[str, str | None]:
        """Return a snapshot of the memoized key -> entry name map.

        Thread-safe.
        """
        with self._lock:
            return dict(self._name_map)

    def __len__(self) -> int:
        """Return the number of entries in the underlying store."""
        return len(self._entry_names)
