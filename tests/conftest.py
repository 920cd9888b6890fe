"""Pytest configuration for the stringbank test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from stringbank.resources import MemoryResourceStore, ResourceLocator
from stringbank.tables import StringTableCache

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED FIXTURES
# =============================================================================

NAMESPACE = "test.res"

SAMPLE_ENTRIES: dict[str, bytes | str] = {
    f"{NAMESPACE}.text.text_species_en.txt": "\nBulbasaur\nIvysaur\nVenusaur",
    f"{NAMESPACE}.text.text_species_fr.txt": "\r\nBulbizarre\r\nHerbizarre\r\nFlorizarre",
    f"{NAMESPACE}.text.text_balls_en.txt": (
        "(None)\nMaster Ball\nUltra Ball\nGreat Ball\nPoké Ball\nSafari Ball\nNet Ball"
    ),
    f"{NAMESPACE}.text.countries.txt": (
        "id,ja,en,fr,de,it,es,ko,zh\n"
        "1,日本,Japan,Japon,Japan,Giappone,Japón,일본,日本\n"
        "77,フランス,France,France,Frankreich,Francia,Francia,프랑스,法国\n"
        "49,アメリカ,United States,États-Unis,Vereinigte Staaten,Stati Uniti,"
        "Estados Unidos,미국,美国"
    ),
    f"{NAMESPACE}.text.versions.txt": "id,name\n2,Yellow\n0,Red\n1,Blue",
    f"{NAMESPACE}.text.legality_fr.txt": "Title = Légalité\nMissing = Introuvable",
    f"{NAMESPACE}.byte.header.bin": b"\x00\x01\x02\x03",
    # Same suffix under a foreign namespace: never matched.
    "other.res.text.text_species_de.txt": "\nBisasam",
}


@pytest.fixture
def memory_store() -> MemoryResourceStore:
    """In-memory bundle store holding SAMPLE_ENTRIES."""
    return MemoryResourceStore(SAMPLE_ENTRIES)


@pytest.fixture
def locator(memory_store: MemoryResourceStore) -> ResourceLocator:
    """Locator over the sample store."""
    return ResourceLocator(memory_store, NAMESPACE)


@pytest.fixture
def table_cache(locator: ResourceLocator) -> StringTableCache:
    """Fresh table cache over the sample locator."""
    return StringTableCache(locator)
