"""
Configuration settings for obadhlib.

Every setting can be overridden with an environment variable; constructor
arguments on ObadhParser take precedence over both.
"""
import logging
import os


def _env_flag(name, default):
    """Read a boolean flag from the environment."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# ============================================
# OUTPUT
# ============================================

# Convert ASCII digits to Bengali numerals (0 -> ০)
BENGALI_NUMERALS = _env_flag("OBADH_BENGALI_NUMERALS", True)

# Substitute punctuation and symbols from the symbol table (. -> ।)
CONVERT_SYMBOLS = _env_flag("OBADH_CONVERT_SYMBOLS", True)

# ============================================
# LOGGING
# ============================================

LOG_LEVEL = os.getenv("OBADH_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level=None):
    """Attach a stream handler to the package logger.

    The library never does this on import; hosts that want fallback
    diagnostics call it once at startup.
    """
    logger = logging.getLogger("obadhlib")
    logger.setLevel(level or LOG_LEVEL)
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
