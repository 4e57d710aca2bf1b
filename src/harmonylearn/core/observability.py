"""
Logging setup for the HarmonyLearn process.
"""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once at startup."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)

    # uvicorn prints its own access line; ours carries the timing
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
