"""Environment-driven settings for the CLI."""

import os

from topng.core.shapes import Settings


def load_settings() -> Settings:
    """Build Settings from TOPNG_* environment variables.

    Raises pydantic.ValidationError on invalid values.
    """
    return Settings(
        log_level=os.getenv("TOPNG_LOG_LEVEL", "WARNING"),
        pause=os.getenv("TOPNG_PAUSE", "auto"),
    )
