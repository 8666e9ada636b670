import logging
import subprocess
from typing import List, Optional

from pmsh.exceptions import ProgramExitError, ProgramLaunchError


class SubprocessLauncher:
    """Runs a program in the foreground with the shell's own stdin/stdout/stderr."""

    def launch(self, argv: List[str]) -> int:
        """Spawn argv and block until it exits. OSError means it never started."""
        proc = subprocess.Popen(argv)
        try:
            return proc.wait()
        except KeyboardInterrupt:
            # Ctrl+C reaches the child too; wait for it to go away
            return proc.wait()


class ProgramExecutor:
    def __init__(
        self,
        launcher: Optional[SubprocessLauncher] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._launcher = launcher or SubprocessLauncher()
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, command) -> None:
        """
        Run an external command and wait for it.

        Raises:
            ProgramLaunchError: the program could not be started
            ProgramExitError: the program ran and exited non-zero
        """
        argv = command.argv()
        self._logger.debug(f"Launching {argv}")
        try:
            status = self._launcher.launch(argv)
        except FileNotFoundError:
            raise ProgramLaunchError(command.name, "command not found")
        except PermissionError:
            raise ProgramLaunchError(command.name, "permission denied")
        except OSError as e:
            raise ProgramLaunchError(command.name, e.strerror or str(e))
        except UnicodeError as e:
            raise ProgramLaunchError(command.name, str(e))

        self._logger.debug(f"{command.name} exited with status {status}")
        if status != 0:
            raise ProgramExitError(command.name, status)
