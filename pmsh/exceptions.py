"""
Exceptions raised by the shell components.
"""


class ShellError(Exception):
    """Base exception class for shell errors."""

    pass


class HomeResolutionError(ShellError):
    """Raised when the home directory cannot be determined."""

    pass


class HistoryIOError(ShellError):
    """Raised when the history file cannot be read or written."""

    pass


class DirectoryChangeError(ShellError):
    """Raised when the working directory cannot be changed."""

    def __init__(self, target, reason):
        self.target = target
        self.reason = reason
        super().__init__(f"{target}: {reason}")


class PreviousDirectoryUnavailable(ShellError):
    """Raised by `cd -` before any successful directory change."""

    def __init__(self):
        super().__init__("OLDPWD not set")


class ProgramLaunchError(ShellError):
    """Raised when an external program could not be started at all."""

    def __init__(self, program, cause):
        self.program = program
        self.cause = cause
        super().__init__(f"{program}: {cause}")


class ProgramExitError(ShellError):
    """Raised when an external program exits with a non-zero status."""

    def __init__(self, program, status):
        self.program = program
        self.status = status
        super().__init__(f"{program}: exited with status {status}")
