import logging
import os
import subprocess
import sys

from xsh.builtin import execute_builtin
from xsh.errors import ShellSystemError

logger = logging.getLogger(__name__)


def _private_opener(path, flags):
    # New output files are readable/writable by the owner only
    return os.open(path, flags, 0o600)


def open_input(path):
    try:
        f = open(path, "r")
    except (OSError, ValueError) as e:
        raise ShellSystemError("open", e, filename=path) from e
    logger.debug("stdin < %s", path)
    return f


def open_output(path):
    """Create or truncate `path` for writing."""
    try:
        f = open(path, "w", opener=_private_opener)
    except (OSError, ValueError) as e:
        raise ShellSystemError("open", e, filename=path) from e
    logger.debug("stdout > %s", path)
    return f


def run_external(args, env, stdin=None, stdout=None, background=False):
    """
    Run an external command with subprocess.
    Returns: exit code (0 for a background launch)
    """
    # Anything we printed must reach the terminal before the child writes
    sys.stdout.flush()
    try:
        p = subprocess.Popen(args, stdin=stdin, stdout=stdout, env=dict(env))
    except (OSError, ValueError) as e:
        raise ShellSystemError("spawn", e, filename=args[0]) from e

    logger.debug("spawned pid %d: %s (background=%s)", p.pid, args, background)

    if background:
        print(f"[{p.pid}] started in background: {' '.join(args)}")
        return 0

    try:
        exit_code = p.wait()
    except KeyboardInterrupt:
        # The child got the same SIGINT; wait for it to act on it
        print()
        exit_code = p.wait()
    if exit_code != 0:
        print(f"xsh: process exited with code {exit_code}", file=sys.stderr)
    return exit_code


def execute_command(cmd, env):
    """
    Open redirections, run the built-in or external command, close files.
    Returns: exit_code
    """
    opened_files = []
    try:
        stdin_f = stdout_f = None
        if cmd.stdin_path is not None:
            stdin_f = open_input(cmd.stdin_path)
            opened_files.append(stdin_f)
        if cmd.stdout_path is not None:
            stdout_f = open_output(cmd.stdout_path)
            opened_files.append(stdout_f)

        # Blank line
        if not cmd.args:
            return 0

        executed, exit_code = execute_builtin(cmd.args, env, stdout=stdout_f)
        if executed:
            return exit_code

        return run_external(cmd.args, env, stdin=stdin_f, stdout=stdout_f,
                            background=cmd.background)
    finally:
        for f in opened_files:
            f.close()
