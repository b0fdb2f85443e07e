import logging
import re
from collections import namedtuple

from config import MAX_ARGS
from xsh.errors import CapacityError, ShellSyntaxError

logger = logging.getLogger(__name__)

_DELIMS_RE = re.compile(r"[ \t\r\n]+")

CommandLine = namedtuple("CommandLine", ["args", "background", "stdin_path", "stdout_path"])


def tokenize(text):
    """Split on runs of space, tab and newline. No quoting."""
    return [tok for tok in _DELIMS_RE.split(text) if tok]


def _cut_redirection(line, marker, what):
    """
    Cut the line at the first `marker`.
    Returns (left part, first word after the marker) or (line, None).
    """
    idx = line.find(marker)
    if idx == -1:
        return line, None

    words = tokenize(line[idx + 1:])
    if not words:
        raise ShellSyntaxError(f"no {what} file specified")
    return line[:idx], words[0]


def parse_command(line, max_args=MAX_ARGS):
    """
    Extract directives, then tokenize what is left.
    Order: '&' then '<' then '>' then split. Every marker cuts the line,
    so text to the right of it (past a file name) is dropped.
    Returns: CommandLine(args, background, stdin_path, stdout_path)
    """
    background = False
    amp = line.find("&")
    if amp != -1:
        background = True
        line = line[:amp]

    line, stdin_path = _cut_redirection(line, "<", "input")
    line, stdout_path = _cut_redirection(line, ">", "output")

    args = tokenize(line)
    if len(args) > max_args:
        raise CapacityError(f"too many arguments (max {max_args})")

    cmd = CommandLine(args, background, stdin_path, stdout_path)
    logger.debug("parsed %r", cmd)
    return cmd
