import logging
import os
import sys

from config import EXIT_COMMANDS, EXPAND_ALL, LOG_LEVEL, MAX_INPUT, PROMPT
from xsh.errors import CapacityError, ShellError
from xsh.executor import execute_command
from xsh.expander import expand_variables
from xsh.parser import parse_command

logger = logging.getLogger(__name__)


def init_logging(level=LOG_LEVEL):
    """Send log records to stderr"""
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def handle_line(line, env, expand_all=EXPAND_ALL):
    """
    Run one command line.
    Errors are reported to stderr; they never end the session.
    Returns: exit_code
    """
    try:
        if len(line) >= MAX_INPUT:
            raise CapacityError(f"input line too long (max {MAX_INPUT - 1} characters)")
        if expand_all:
            line = expand_variables(line, env)
        cmd = parse_command(line)
        return execute_command(cmd, env)
    except ShellError as e:
        print(f"xsh: {e}", file=sys.stderr)
        return 1


def main_loop(env=None, prompt=PROMPT):
    """Main shell loop"""
    if env is None:
        env = os.environ

    last_status = 0
    while True:
        try:
            line = input(prompt)
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        # Only the bare word ends the session
        if line in EXIT_COMMANDS:
            break

        last_status = handle_line(line, env)
        logger.debug("exit status %d", last_status)

    return 0


def main():
    init_logging()
    return main_loop()
