"""stringbank - cached string tables and translation merging for bundled resources.

Resolves named, locale-qualified text resources bundled with an application
into indexable string tables, builds display-ready (label, id) lists from
them, and reconciles the named string properties of translatable objects
with saved translation files.

Public API:
    StringBank - Application-owned access point (store + locator + cache)
    BankConfig - Resource naming and list layout configuration
    StringTableCache - Thread-safe lazy table cache
    ResourceLocator - Resource key to bundle entry resolution
    ComboEntry - (text, value) list entry

Exceptions:
    StringBankError - Base exception class
    ResourceNotFoundError - Required (binary) resource missing
    ResourceReadError - Resource stream could not be read
    TableFormatError - Unparseable table content
    PropertyAccessError - Property unknown to or rejected by a target

Submodules:
    stringbank.resources - Bundle stores and the resource locator
    stringbank.tables - Table cache, sparse indexing, list builders
    stringbank.localization - Property accessors and the translation merger
"""

# Essential Public API - Minimal exports for clean namespace
from .bank import StringBank
from .config import BankConfig
from .errors import (
    PropertyAccessError,
    ResourceError,
    ResourceNotFoundError,
    ResourceReadError,
    StringBankError,
    TableFormatError,
)
from .resources import ResourceLocator
from .tables import ComboEntry, StringTableCache

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("stringbank")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BankConfig",
    "ComboEntry",
    "PropertyAccessError",
    "ResourceError",
    "ResourceLocator",
    "ResourceNotFoundError",
    "ResourceReadError",
    "StringBank",
    "StringBankError",
    "StringTableCache",
    "TableFormatError",
    "__version__",
]
