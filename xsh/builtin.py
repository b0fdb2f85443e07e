import logging
import os
import sys

from xsh.errors import CapacityError, ShellSystemError, UsageError
from xsh.expander import expand_variables

logger = logging.getLogger(__name__)


def builtin_cd(args, env, out):
    """Change directory"""
    if not args:
        raise UsageError("cd: expected argument")
    try:
        os.chdir(args[0])
    except (OSError, ValueError) as e:
        raise ShellSystemError("cd", e, filename=args[0]) from e
    return 0


def builtin_pwd(args, env, out):
    """Print working directory"""
    try:
        cwd = os.getcwd()
    except OSError as e:
        raise ShellSystemError("pwd", e) from e
    print(cwd, file=out)
    return 0


def builtin_set(args, env, out):
    """set NAME VALUE"""
    if len(args) < 2:
        raise UsageError("set: expected variable and value")
    name, value = args[0], args[1]
    # os.environ refuses "=" in a name and NUL bytes anywhere
    try:
        env[name] = value
    except (OSError, ValueError) as e:
        raise ShellSystemError("set", e, filename=name) from e
    logger.debug("set %s=%r", name, value)
    return 0


def builtin_unset(args, env, out):
    """
    unset NAME
    Removes the variable; unsetting a missing name is not an error.
    """
    if not args:
        raise UsageError("unset: expected variable")
    try:
        env.pop(args[0], None)
    except (OSError, ValueError) as e:
        raise ShellSystemError("unset", e, filename=args[0]) from e
    logger.debug("unset %s", args[0])
    return 0


def builtin_echo(args, env, out):
    """Print arguments after $VAR expansion"""
    status = 0
    words = []
    for arg in args:
        try:
            words.append(expand_variables(arg, env))
        except CapacityError as e:
            # Report and keep going with the other arguments
            print(f"echo: {e}", file=sys.stderr)
            status = 1
    print(" ".join(words), file=out)
    return status


BUILTINS = {
    "cd": builtin_cd,
    "pwd": builtin_pwd,
    "set": builtin_set,
    "unset": builtin_unset,
    "echo": builtin_echo,
}


def is_builtin(name):
    return name in BUILTINS


def execute_builtin(args, env, stdout=None):
    """
    Execute built-in command if it matches.
    Returns (executed: bool, exit_code: int)
    """
    if not args or not is_builtin(args[0]):
        return False, 0

    out = stdout if stdout is not None else sys.stdout
    return True, BUILTINS[args[0]](args[1:], env, out)
