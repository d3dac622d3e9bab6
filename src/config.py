"""
Configuration settings for undocalc.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
env_file = Path(__file__).parent / ".env"
if env_file.exists():
    load_dotenv(env_file)

# Accumulators start from zero
INITIAL_VALUE = 0.0

# History capacity
# Unset or empty means unbounded, matching the default Accumulator
def get_max_history():
    """Get UNDOCALC_MAX_HISTORY as an int, or None when unset."""
    raw = os.getenv("UNDOCALC_MAX_HISTORY", "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(
            f"UNDOCALC_MAX_HISTORY must be a positive integer, got {raw!r}"
        ) from None
    if value < 1:
        raise ValueError(
            f"UNDOCALC_MAX_HISTORY must be a positive integer, got {value}"
        )
    return value

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", os.getenv("UNDOCALC_LOG_LEVEL", "INFO")).upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
