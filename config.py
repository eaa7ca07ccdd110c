"""
Configuration constants for the graph search visualizer.

Every tunable lives here.  Values that differ between deployments are
read from environment variables with a sensible default.
"""

import os

# =============================================================================
# Server Configuration
# =============================================================================

HOST = os.environ.get("GSV_HOST", "127.0.0.1")
PORT = int(os.environ.get("GSV_PORT", "5000"))

# Flask debug mode (reloader + interactive tracebacks); never on in production
DEBUG = os.environ.get("GSV_DEBUG", "").lower() in ("1", "true", "yes")

# =============================================================================
# Search Defaults
# =============================================================================

# Used by the HTTP API when a request leaves the field out
DEFAULT_ALGORITHM = os.environ.get("GSV_DEFAULT_ALGORITHM", "bfs")
DEFAULT_HEURISTIC = os.environ.get("GSV_DEFAULT_HEURISTIC", "euclidean")

# =============================================================================
# Playback Configuration
# =============================================================================

# Milliseconds between replayed steps
DEFAULT_STEP_DELAY_MS = int(os.environ.get("GSV_STEP_DELAY_MS", "500"))

# Anything faster is clamped to this
MIN_STEP_DELAY_MS = 20

# Milliseconds per step for the speed buttons
SPEED_PRESETS = {
    "slow":   1000,   # teaching mode
    "medium": 400,
    "fast":   150,    # demo mode
    "turbo":  50,
}

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
