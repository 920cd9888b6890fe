"""Shared constants for stringbank.

Centralizes the naming conventions of bundled resources, the translation
line format, and the fixed column layout of locale-indexed lists. Placing
constants here avoids circular imports between the resources, tables and
localization packages.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Resource naming
    "DEFAULT_NAMESPACE",
    "DEFAULT_TEXT_FORMAT",
    "DEFAULT_ENCODING",
    "TEXT_SUFFIX",
    # Translation lines
    "TRANSLATION_SEPARATOR",
    # List layout
    "LOCALE_COLUMNS",
    "CSV_DELIMITER",
    "LINE_SEPARATOR",
    # Logging
    "LOG_TRUNCATE_VALUE",
]

# ============================================================================
# RESOURCE NAMING
# ============================================================================
#
# Bundled entries are addressed with dotted names:
#
#   <namespace>.text.<anything><key>.txt   -> text tables
#   <namespace>.byte.<name>                -> binary blobs
#
# The text suffix match is case-insensitive; the namespace prefix is not.

# Namespace of the data bundled with this package (src/stringbank/data).
DEFAULT_NAMESPACE: str = "stringbank.data"

# Format qualifier prepended to locale-qualified table keys
# ("text" + "species" + "en" -> "text_species_en").
DEFAULT_TEXT_FORMAT: str = "text"

DEFAULT_ENCODING: str = "utf-8"

TEXT_SUFFIX: str = ".txt"

# ============================================================================
# TRANSLATION LINES
# ============================================================================

# "PropertyName = Value". Only the first occurrence is a split point, so
# values may themselves contain the separator.
TRANSLATION_SEPARATOR: str = " = "

# ============================================================================
# LIST LAYOUT
# ============================================================================

# Column order of locale-indexed lists: "id,ja,en,fr,de,it,es,ko,zh".
# Column 0 is the numeric id, so language N lives in column N + 1.
LOCALE_COLUMNS: tuple[str, ...] = ("ja", "en", "fr", "de", "it", "es", "ko", "zh")

# No quoting or escaping: a literal comma inside a field is not supported.
CSV_DELIMITER: str = ","

LINE_SEPARATOR: str = "\n"

# ============================================================================
# LOGGING
# ============================================================================

# Values written to WARNING logs are truncated to keep log lines bounded.
LOG_TRUNCATE_VALUE: int = 100
