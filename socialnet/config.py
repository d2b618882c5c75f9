"""
Configuration constants for the social network analysis core.

All tunable parameters are defined here. The log level can be
overridden through the environment or a local .env file.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root is parent of socialnet/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Edge Weight Configuration
# =============================================================================

# Default weight for a new Edge when none is given
DEFAULT_EDGE_WEIGHT = 1.0

# Floor for similarity-derived edge weights (Edge requires weight > 0)
MIN_EDGE_WEIGHT = 0.01

# Weight returned when a node reference is missing
DEFAULT_NODE_PAIR_WEIGHT = 1.0

# Weight returned when either feature mapping is missing or empty
DEFAULT_FEATURE_WEIGHT = 1.0

# =============================================================================
# Normalization Configuration
# =============================================================================

# Value returned for a degenerate range (max <= min) or no spread
DEGENERATE_NORMALIZED_VALUE = 0.5

# Value assigned to invalid (non-positive, NaN, infinite) weights
INVALID_NORMALIZED_VALUE = 0.0

# Display scale used by normalize_to_1_10
DISPLAY_SCALE_MIN = 1.0
DISPLAY_SCALE_MAX = 10.0

# =============================================================================
# Analysis Configuration
# =============================================================================

# Default number of nodes returned by top_degree_nodes
DEFAULT_TOP_K = 5

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
