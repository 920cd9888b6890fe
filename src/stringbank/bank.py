"""StringBank - application-owned access point for bundled string tables.

Wires a bundle store, a ResourceLocator and a StringTableCache together
from one BankConfig. Create one StringBank at startup and pass it to the
code that populates lists or localizes objects; separate instances share
nothing, which keeps tests isolated.

Python 3.13+. External dependency: Babel (via the list builders).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from stringbank.config import BankConfig
from stringbank.localization.merger import get_localization, load_and_apply
from stringbank.resources.locator import ResourceLocator
from stringbank.resources.store import PackageResourceStore
from stringbank.tables.cache import StringTableCache
from stringbank.tables.indexing import indexed_from_csv
from stringbank.tables.lists import ComboEntry, locale_indexed_list, simple_list

if TYPE_CHECKING:
    from collections.abc import Sequence

    from stringbank.localization.properties import PropertyAccessor
    from stringbank.resources.store import ResourceStore

__all__ = ["StringBank"]

logger = logging.getLogger(__name__)


class StringBank:
    """String tables and translation files of one resource bundle.

    Thread Safety:
        All methods are thread-safe; see StringTableCache and
        ResourceLocator.

    Example:
        >>> bank = StringBank()  # data bundled with stringbank
        >>> bank.species("en")[1]
        'Bulbasaur'
        >>> bank.get_table("text_species_xx")
        []

    Example - Application bundle:
        >>> config = BankConfig(namespace="myapp.resources")
        >>> bank = StringBank(PackageResourceStore("myapp.resources"), config)
        >>> bank.localize(AttributeAccessor(LegalityStrings), "de")
    """

    __slots__ = ("_cache", "_config", "_locator")

    def __init__(
        self,
        store: ResourceStore | None = None,
        config: BankConfig | None = None,
    ) -> None:
        """Initialize string bank.

        Args:
            store: Bundle store (default: package data under config.namespace)
            config: Bank configuration (default: BankConfig())
        """
        self._config = config or BankConfig()
        if store is None:
            store = PackageResourceStore(self._config.namespace)
        self._locator = ResourceLocator(
            store, self._config.namespace, encoding=self._config.encoding
        )
        self._cache = StringTableCache(self._locator, text_format=self._config.text_format)
        logger.info(
            "StringBank initialized: namespace=%s, entries=%d",
            self._config.namespace,
            len(self._locator),
        )

    @property
    def config(self) -> BankConfig:
        """Configuration this bank was created with."""
        return self._config

    @property
    def locator(self) -> ResourceLocator:
        """Underlying resource locator."""
        return self._locator

    @property
    def cache(self) -> StringTableCache:
        """Underlying string table cache."""
        return self._cache

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def get_table(self, key: str) -> list[str]:
        """Get the string table for a resource key (empty if absent)."""
        return self._cache.get_table(key)

    def get_localized_table(self, category: str, locale: str) -> list[str]:
        """Get the ``{text_format}_{category}_{locale}`` table (empty if absent)."""
        return self._cache.get_localized_table(category, locale)

    def get_indexed_table(self, key: str) -> list[str]:
        """Get a CSV table as a sparse array indexed by its id column.

        Raises:
            TableFormatError: If an id is not an integer
        """
        return indexed_from_csv(self._cache.get_table(key))

    def get_string_resource(self, key: str) -> str | None:
        """Get the decoded text of a resource, bypassing the table cache."""
        return self._locator.read_text(key)

    def get_binary(self, name: str) -> bytes:
        """Get a binary resource by its short name.

        Raises:
            ResourceNotFoundError: If the bundle has no such binary entry
        """
        return self._locator.read_bytes(name)

    def species(self, locale: str) -> list[str]:
        """Species names; index N is species N."""
        return self.get_localized_table("species", locale)

    def moves(self, locale: str) -> list[str]:
        """Move names; index N is move N."""
        return self.get_localized_table("moves", locale)

    def abilities(self, locale: str) -> list[str]:
        """Ability names; index N is ability N."""
        return self.get_localized_table("abilities", locale)

    def natures(self, locale: str) -> list[str]:
        """Nature names; index N is nature N."""
        return self.get_localized_table("natures", locale)

    def forms(self, locale: str) -> list[str]:
        """Form names."""
        return self.get_localized_table("forms", locale)

    def types(self, locale: str) -> list[str]:
        """Type names; index N is type N."""
        return self.get_localized_table("types", locale)

    def characteristics(self, locale: str) -> list[str]:
        """Characteristic phrases."""
        return self.get_localized_table("character", locale)

    def items(self, locale: str) -> list[str]:
        """Item names; index N is item N."""
        return self.get_localized_table("items", locale)

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def country_region_list(self, key: str, locale: str) -> list[ComboEntry]:
        """Label-sorted list from a locale-indexed CSV table.

        Raises:
            ValueError: If locale has no label column
        """
        return locale_indexed_list(
            self._cache.get_table(key), locale, self._config.locale_columns
        )

    def unsorted_list(self, key: str) -> list[ComboEntry]:
        """Table-order list from an ``id,label`` CSV table."""
        return simple_list(self._cache.get_table(key))

    # ------------------------------------------------------------------
    # Localization
    # ------------------------------------------------------------------

    def localize(
        self,
        accessor: PropertyAccessor,
        locale_code: str,
        file_prefix: str | None = None,
    ) -> int:
        """Apply the bundled translation file for a translatable object.

        Args:
            accessor: Target's property accessor
            locale_code: Locale code (e.g., "fr")
            file_prefix: Translation file prefix (default: accessor.type_name)

        Returns:
            Number of properties set
        """
        prefix = file_prefix or accessor.type_name
        return load_and_apply(accessor, self._cache, prefix, locale_code)

    def get_localization(
        self,
        accessor: PropertyAccessor,
        locale_code: str | None = None,
        file_prefix: str | None = None,
    ) -> list[str]:
        """Dump a translatable object, reconciled with its bundled translation.

        Without locale_code there is no saved translation and the plain dump
        is returned. A locale whose translation file is not bundled is
        treated the same way.

        Args:
            accessor: Target's property accessor
            locale_code: Locale of the saved translation to reconcile with
            file_prefix: Translation file prefix (default: accessor.type_name)

        Returns:
            Reconciled ``name = value`` lines
        """
        saved: Sequence[str] | None = None
        if locale_code is not None:
            prefix = file_prefix or accessor.type_name
            saved = self._cache.get_table(f"{prefix}_{locale_code}") or None
        return get_localization(accessor, saved)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"StringBank(namespace={self._config.namespace!r}, "
            f"tables={len(self._cache)})"
        )
