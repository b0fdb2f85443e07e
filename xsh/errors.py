class ShellError(Exception):
    """Base class for errors that abort a single command line."""


class UsageError(ShellError):
    """A built-in was called without a required argument."""


class ShellSyntaxError(ShellError):
    """A redirection marker is not followed by a file name."""


class CapacityError(ShellError):
    """Input is larger than a configured limit."""


class ShellSystemError(ShellError):
    """
    An OS call failed (chdir, getcwd, setenv, open, spawn).
    Keeps the original OSError or ValueError (NUL byte, '=' in a
    variable name) so the system diagnostic can be shown.
    """

    def __init__(self, op, err, filename=None):
        self.op = op
        self.err = err
        detail = getattr(err, "strerror", None) or str(err)
        filename = getattr(err, "filename", None) or filename
        if filename is not None:
            detail = f"{filename}: {detail}"
        super().__init__(f"{op}: {detail}")
