"""
Centralized constants for remoji.

Paths, URLs and exit codes live here so the CLI, the importer and the
tests agree on them.
"""

from pathlib import Path

# =============================================================================
# REMOTE SOURCE
# =============================================================================

EMOJI_TABLE_URL = "http://unicode.org/emoji/charts/full-emoji-list.html"
REQUEST_TIMEOUT_SECONDS = 60  # Single attempt, no retries

# CSS classes of the header cells in the emoji table
CATEGORY_HEADER_CLASS = "bighead"
SUBCATEGORY_HEADER_CLASS = "mediumhead"

# =============================================================================
# LOCAL STORAGE
# =============================================================================

REMOJI_DATA_DIR = Path.home() / ".local" / "remoji"
CACHE_FILENAME = "emojis.json"
LOG_FILENAME = "remoji.log"

# =============================================================================
# OUTPUT
# =============================================================================

RAW_STRING_CATEGORY = "Raw String"  # Sentinel for literal passthrough entries
GLYPH_SEPARATOR = " "
DETAIL_SEPARATOR = "\n"

# =============================================================================
# EXIT CODES
# =============================================================================

EXIT_NOT_FOUND = 1
EXIT_INVALID_QUERY = 3
EXIT_CACHE_ERROR = 4

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

ENV_VAR_DEFINITIONS = {
    "REMOJI_HOME": {
        "description": "Directory holding the emoji cache and log file",
        "default": None,
        "valid_values": None,
    },
    "REMOJI_CACHE_FILE": {
        "description": "Explicit path of the emoji cache JSON file",
        "default": None,
        "valid_values": None,
    },
    "REMOJI_EMOJI_TABLE_URL": {
        "description": "URL of the HTML emoji table used for import",
        "default": EMOJI_TABLE_URL,
        "valid_values": None,
    },
    "REMOJI_LOG_LEVEL": {
        "description": "Log level when no -v flag is given",
        "default": "WARNING",
        "valid_values": ["DEBUG", "INFO", "WARNING", "ERROR"],
    },
}
