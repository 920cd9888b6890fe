"""Bundle stores: named-blob sources for stringbank resources.

Provides the protocol every bundle store satisfies and three
implementations: package data (importlib.resources), a directory on disk
with path-traversal protection, and an in-memory mapping.

Entry names are dotted paths prefixed by a namespace, so a file
``text/text_species_en.txt`` in package ``stringbank.data`` is exposed as
``stringbank.data.text.text_species_en.txt``.

Components:
    ResourceStore - Protocol for bundle stores (structural typing)
    PackageResourceStore - Files shipped inside an importable package
    PathResourceStore - Files under a directory on disk
    MemoryResourceStore - In-memory entries (tests, embedders)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import io
from collections.abc import Mapping
from importlib import resources
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, Protocol

from stringbank.constants import DEFAULT_ENCODING

if TYPE_CHECKING:
    from collections.abc import Iterator
    from importlib.resources.abc import Traversable

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "ResourceStore",
    # Concrete stores
    "PackageResourceStore",
    "PathResourceStore",
    "MemoryResourceStore",
]

# Package scaffolding that never counts as a bundle entry.
_SKIPPED_NAMES = frozenset({"__init__.py", "__pycache__", "py.typed"})


class ResourceStore(Protocol):
    """Protocol for named-blob bundle stores.

    The entry set is fixed for the lifetime of a store: consumers may
    snapshot ``list_entry_names()`` once and memoize lookups against it.

    Example:
        >>> class ZipStore:
        ...     def __init__(self, archive: zipfile.ZipFile) -> None:
        ...         self._archive = archive
        ...     def list_entry_names(self) -> frozenset[str]:
        ...         return frozenset(n.replace("/", ".") for n in self._archive.namelist())
        ...     def open_entry(self, name: str) -> BinaryIO | None:
        ...         ...
    """

    def list_entry_names(self) -> frozenset[str]:
        """Return the names of all entries in the store."""

    def open_entry(self, name: str) -> BinaryIO | None:
        """Open an entry as a binary stream.

        The caller owns the returned stream and must close it.

        Args:
            name: Exact entry name, as returned by list_entry_names()

        Returns:
            Readable binary stream, or None if no such entry exists

        Raises:
            OSError: If the entry exists but cannot be opened
        """


def _dotted(namespace: str, parts: tuple[str, ...]) -> str:
    return ".".join((namespace, *parts))


class PackageResourceStore:
    """Bundle store over the files of an importable package.

    Walks the package tree once at construction. Subdirectories become
    dotted name segments; package scaffolding (``__init__.py``,
    ``__pycache__``) is skipped.

    Example:
        >>> store = PackageResourceStore("stringbank.data")
        >>> "stringbank.data.text.text_species_en.txt" in store.list_entry_names()
        True

    Attributes:
        package: Importable package holding the data files
        namespace: Prefix of every entry name (defaults to the package name)
    """

    __slots__ = ("_entries", "namespace", "package")

    def __init__(self, package: str, namespace: str | None = None) -> None:
        """Initialize package store.

        Args:
            package: Dotted name of the package holding the data files
            namespace: Entry name prefix (default: the package name)

        Raises:
            ModuleNotFoundError: If the package cannot be imported
        """
        self.package = package
        self.namespace = namespace or package
        self._entries: dict[str, Traversable] = {
            _dotted(self.namespace, parts): item
            for parts, item in self._walk(resources.files(package), ())
        }

    @classmethod
    def _walk(
        cls, node: Traversable, prefix: tuple[str, ...]
    ) -> Iterator[tuple[tuple[str, ...], Traversable]]:
        for child in node.iterdir():
            if child.name in _SKIPPED_NAMES or child.name.endswith(".pyc"):
                continue
            parts = (*prefix, child.name)
            if child.is_dir():
                yield from cls._walk(child, parts)
            elif child.is_file():
                yield parts, child

    def list_entry_names(self) -> frozenset[str]:
        """Return the names of all data files in the package."""
        return frozenset(self._entries)

    def open_entry(self, name: str) -> BinaryIO | None:
        """Open a package data file as a binary stream.

        Args:
            name: Entry name

        Returns:
            Binary stream, or None if the package has no such file
        """
        item = self._entries.get(name)
        if item is None:
            return None
        return item.open("rb")

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"PackageResourceStore(package={self.package!r}, entries={len(self._entries)})"


class PathResourceStore:
    """Bundle store over the files under a directory on disk.

    Useful for development layouts and for translation files edited outside
    the package. The directory is scanned once at construction.

    Security:
        Only files found by the construction-time scan can be opened, and
        every resolved path is re-validated against the root directory
        before opening, so symlinks cannot escape the root.

    Example:
        >>> store = PathResourceStore("resources", namespace="myapp.resources")
        >>> store.open_entry("myapp.resources.text.lang_en.txt")
        # Opens: resources/text/lang_en.txt

    Attributes:
        root_dir: Resolved root directory
        namespace: Prefix of every entry name
    """

    __slots__ = ("_entries", "namespace", "root_dir")

    def __init__(self, root_dir: str | Path, namespace: str) -> None:
        """Initialize directory store.

        Args:
            root_dir: Directory holding the data files
            namespace: Entry name prefix

        Raises:
            ValueError: If namespace is empty
            NotADirectoryError: If root_dir is not a directory
        """
        if not namespace:
            msg = "namespace must not be empty"
            raise ValueError(msg)
        self.root_dir = Path(root_dir).resolve()
        if not self.root_dir.is_dir():
            msg = f"Resource root is not a directory: '{self.root_dir}'"
            raise NotADirectoryError(msg)
        self.namespace = namespace
        self._entries: dict[str, Path] = {}
        for path in sorted(self.root_dir.rglob("*")):
            relative = path.relative_to(self.root_dir)
            if not path.is_file() or any(p in _SKIPPED_NAMES for p in relative.parts):
                continue
            self._entries[_dotted(namespace, relative.parts)] = path

    @staticmethod
    def _is_safe_path(base_dir: Path, full_path: Path) -> bool:
        """Check if full_path resolves to a location within base_dir.

        Args:
            base_dir: Base directory (will be resolved)
            full_path: Full path to check (will be resolved)

        Returns:
            True if resolved full_path is within resolved base_dir
        """
        try:
            full_path.resolve().relative_to(base_dir.resolve())
            return True
        except ValueError:
            return False

    def list_entry_names(self) -> frozenset[str]:
        """Return the names of all files under the root directory."""
        return frozenset(self._entries)

    def open_entry(self, name: str) -> BinaryIO | None:
        """Open a file as a binary stream.

        Args:
            name: Entry name

        Returns:
            Binary stream, or None if no such file was found at construction

        Raises:
            ValueError: If the file now resolves outside the root directory
            OSError: If the file cannot be opened
        """
        path = self._entries.get(name)
        if path is None:
            return None
        if not self._is_safe_path(self.root_dir, path):
            msg = f"Path traversal detected: entry '{name}' resolves outside '{self.root_dir}'"
            raise ValueError(msg)
        return path.open("rb")

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"PathResourceStore(root_dir='{self.root_dir}', entries={len(self._entries)})"


class MemoryResourceStore:
    """Bundle store over an in-memory mapping of entry name to content.

    ``str`` content is encoded with the store's encoding; ``bytes`` content
    is served as-is. The mapping is copied at construction.

    Example:
        >>> store = MemoryResourceStore({
        ...     "app.res.text.text_species_en.txt": "Egg\\nBulbasaur",
        ... })
    """

    __slots__ = ("_entries",)

    def __init__(
        self,
        entries: Mapping[str, bytes | str],
        *,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        """Initialize memory store.

        Args:
            entries: Entry name to content mapping
            encoding: Encoding applied to ``str`` content (default: utf-8)
        """
        self._entries: dict[str, bytes] = {
            name: data.encode(encoding) if isinstance(data, str) else bytes(data)
            for name, data in entries.items()
        }

    def list_entry_names(self) -> frozenset[str]:
        """Return the names of all entries."""
        return frozenset(self._entries)

    def open_entry(self, name: str) -> BinaryIO | None:
        """Open an entry as an in-memory binary stream.

        Args:
            name: Entry name

        Returns:
            BytesIO over the entry content, or None if absent
        """
        data = self._entries.get(name)
        if data is None:
            return None
        return io.BytesIO(data)

    def __len__(self) -> int:
        """Return the number of entries."""
        return len(self._entries)
