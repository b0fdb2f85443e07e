import os


def _env_bool(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


PROMPT = os.getenv("XSH_PROMPT", "xsh# ")

# Line buffer size; a line may hold at most MAX_INPUT - 1 characters.
# echo arguments share this limit, so only XSH_EXPAND_ALL can push one over it
MAX_INPUT = int(os.getenv("XSH_MAX_INPUT", "1024"))
MAX_ARGS = int(os.getenv("XSH_MAX_ARGS", "64"))

# Expand $VARS on the whole line before parsing instead of only in echo
EXPAND_ALL = _env_bool("XSH_EXPAND_ALL")

LOG_LEVEL = os.getenv("XSH_LOG_LEVEL", "WARNING").upper()

EXIT_COMMANDS = ("exit", "quit")
