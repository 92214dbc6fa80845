"""
Configuration constants for the word graph path finder.

All paths, search settings, and tunable heuristic weights are defined here.
Values can be overridden through environment variables (or a .env file).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root is parent of wordgraph/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Path Configuration
# =============================================================================

# Data directory (contains word lists)
DATA_DIR = PROJECT_ROOT / "data"

# Word list read by the CLI when --words is not given (one word per line)
DEFAULT_WORDS_PATH = Path(os.environ.get("WORDGRAPH_WORDS_PATH", DATA_DIR / "words.txt"))

# Encoding of word list files
WORDS_ENCODING = "utf-8"

# Lowercase words as they are read, so "Time" and "time" are one vertex
LOWERCASE_WORDS = True

# =============================================================================
# Search Configuration
# =============================================================================

# Divides the distance from source to give a Dijkstra priority in [0.0, 1.0].
# Large enough that 5/1000 still sorts before 6/1000.
PRIORITY_DENOMINATOR = 1000.0

# Upper bound of the source to candidate distance used by the A* priority
DEFAULT_MAX_DISTANCE = int(os.environ.get("WORDGRAPH_MAX_DISTANCE", 20))

# Algorithms selectable by name
ALGORITHMS = ("astar", "dijkstra", "bidirectional")

# =============================================================================
# Heuristic Configuration
# =============================================================================

# Candidate priority weights (normalized by their sum):
# priority = w1 * distance + w2 * destination_mismatch
#          + w3 * change_to_rarity + w4 * substitution_rarity
DISTANCE_WEIGHT = 1
DESTINATION_MATCH_WEIGHT = 1
CHANGE_TO_CHARACTER_WEIGHT = 1
CHARACTER_SUBSTITUTION_WEIGHT = 1

DEFAULT_WEIGHTS = (
    DISTANCE_WEIGHT,
    DESTINATION_MATCH_WEIGHT,
    CHANGE_TO_CHARACTER_WEIGHT,
    CHARACTER_SUBSTITUTION_WEIGHT,
)

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


# =============================================================================
# Validation Helpers
# =============================================================================

def validate_data_files() -> dict[str, bool]:
    """Check which data files exist."""
    return {
        "words": DEFAULT_WORDS_PATH.exists(),
    }
