import os

# Random file sizes are drawn from this band (bytes, inclusive)
MIN_FILE_SIZE = 2048
MAX_FILE_SIZE = 16384

# Sentences per generated paragraph
PARAGRAPH_SENTENCES = (3, 4)

BANNER_WIDTH = 125

LOG_LEVEL_ENV = "FILECRAFT_LOG_LEVEL"
SEED_ENV = "FILECRAFT_SEED"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def log_level():
    """Return the logging level name from the environment."""
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    if level not in LOG_LEVELS:
        return "WARNING"
    return level


def seed():
    """Return the integer seed from the environment, or None."""
    value = os.environ.get(SEED_ENV)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None
