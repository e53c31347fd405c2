import os

from dotenv import load_dotenv

# Load from .env if it exists (useful for local development)
load_dotenv()

PROG_NAME = "m3u-shuffle"

VALID_LOGGING_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOGGING_LEVEL = os.getenv("LOGGING_LEVEL", "WARNING").upper()

# Text encoding used for both input and output
ENCODING = os.getenv("M3U_SHUFFLE_ENCODING", "utf-8")


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() not in ("0", "false", "no", "off")


# Whether a missing #EXTM3U header aborts the run (CLI flag overrides)
REQUIRE_HEADER = _env_flag("M3U_SHUFFLE_REQUIRE_HEADER", True)
