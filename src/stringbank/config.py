"""Configuration for StringBank.

Provides a single frozen dataclass that encapsulates the resource naming
and list layout parameters shared by the locator, the table cache and the
list builders.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from stringbank.constants import (
    DEFAULT_ENCODING,
    DEFAULT_NAMESPACE,
    DEFAULT_TEXT_FORMAT,
    LOCALE_COLUMNS,
)

__all__ = ["BankConfig"]


@dataclass(frozen=True, slots=True)
class BankConfig:
    """Immutable configuration for a StringBank.

    All fields have defaults matching the data bundled with this package;
    constructing ``BankConfig()`` with no arguments produces a usable
    configuration.

    Attributes:
        namespace: Dotted prefix of every bundle entry name
            (default: "stringbank.data").
        text_format: Qualifier prepended to locale-qualified table keys
            (default: "text").
        encoding: Text encoding of bundled tables (default: "utf-8").
        locale_columns: Language order of locale-indexed list columns
            (default: ja, en, fr, de, it, es, ko, zh).

    Example:
        >>> config = BankConfig(namespace="myapp.resources")
        >>> bank = StringBank(PackageResourceStore("myapp.resources"), config)
    """

    namespace: str = DEFAULT_NAMESPACE
    text_format: str = DEFAULT_TEXT_FORMAT
    encoding: str = DEFAULT_ENCODING
    locale_columns: tuple[str, ...] = LOCALE_COLUMNS

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If namespace or text_format is empty or malformed,
                or if locale_columns is empty or contains duplicates.
        """
        if not self.namespace or self.namespace.startswith(".") or self.namespace.endswith("."):
            msg = f"namespace must be a non-empty dotted name, got: {self.namespace!r}"
            raise ValueError(msg)
        if not self.text_format or "_" in self.text_format:
            msg = f"text_format must be non-empty and contain no '_', got: {self.text_format!r}"
            raise ValueError(msg)
        if not self.locale_columns:
            msg = "locale_columns must not be empty"
            raise ValueError(msg)
        if len(set(self.locale_columns)) != len(self.locale_columns):
            msg = f"locale_columns must be unique, got: {self.locale_columns!r}"
            raise ValueError(msg)
        # Normalizes lists passed by callers so the dataclass stays hashable.
        object.__setattr__(self, "locale_columns", tuple(self.locale_columns))
