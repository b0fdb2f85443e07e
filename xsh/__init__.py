"""
xsh - a small line-oriented command interpreter.

Built-ins: cd, pwd, set, unset, echo
External commands via subprocess, < and > redirection, background with &.
"""

__version__ = "1.0.0"
