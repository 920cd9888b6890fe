"""Bundled resource access for stringbank.

Submodules:
    store   - ResourceStore protocol, PackageResourceStore,
              PathResourceStore, MemoryResourceStore
    locator - ResourceLocator (key -> entry resolution, scoped reads)

Python 3.13+. Zero external dependencies.
"""

from stringbank.resources.locator import ResourceLocator
from stringbank.resources.store import (
    MemoryResourceStore,
    PackageResourceStore,
    PathResourceStore,
    ResourceStore,
)

__all__ = [
    "MemoryResourceStore",
    "PackageResourceStore",
    "PathResourceStore",
    "ResourceLocator",
    "ResourceStore",
]
