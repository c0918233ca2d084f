"""Exceptions raised by the wmctrl proxy."""


class WmctrlError(Exception):
    """Base class for all wmctrl-wrapper errors."""


class UnsupportedArchitectureError(WmctrlError, RuntimeError):
    """No bundled wmctrl binary exists for the running CPU architecture."""

    def __init__(self, arch):
        self.arch = arch
        super().__init__(f"Unsupported architecture: {arch}")


class CommandError(WmctrlError):
    """wmctrl could not be started or exited with a non-zero status.

    str() of the exception is the captured stderr text, untouched. When the
    process never started there is no stderr, so the OS error text is used
    and ``returncode`` is None.
    """

    def __init__(self, argv, returncode, stdout="", stderr="", message=None):
        self.argv = list(argv)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(stderr if message is None else message)
