import logging
import os
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from pmsh.exceptions import (
    DirectoryChangeError,
    HistoryIOError,
    PreviousDirectoryUnavailable,
)
from pmsh.path_utils import collapse_tilde, home_dir

logger = logging.getLogger(__name__)


class BuiltinResult(Enum):
    HANDLED_CONTINUE = "continue"
    HANDLED_EXIT = "exit"
    NOT_HANDLED = "not_handled"


@dataclass
class ShellState:
    """State the REPL carries between commands."""

    history: List[str] = field(default_factory=list)
    oldpwd: Optional[str] = None


def builtin_help():
    """Print help message"""
    print("""pmsh help:
 Built-in commands:
  cd [dir]      : change directory (no dir: home, '-': previous directory)
  history       : show command history
  help          : print this help
  exit          : save history and exit shell
Anything else is run as an external program.
""")


def _getcwd():
    try:
        return os.getcwd()
    except OSError:
        return None


def change_directory(target, state):
    """
    Change the process working directory and remember the one we left.
    This is the only place in the shell that calls os.chdir.
    """
    current = _getcwd()
    try:
        os.chdir(target)
    except OSError as e:
        raise DirectoryChangeError(target, e.strerror or str(e)) from e
    except UnicodeError as e:
        raise DirectoryChangeError(target, str(e)) from e
    state.oldpwd = current
    logger.debug(f"cd: {current} -> {target}")


def builtin_cd(args, state):
    """Change directory"""
    try:
        if not args:
            home = home_dir()
            if home is None:
                raise DirectoryChangeError("HOME", "not set")
            change_directory(home, state)
        elif args[0] == "-":
            if state.oldpwd is None:
                raise PreviousDirectoryUnavailable()
            target = state.oldpwd
            change_directory(target, state)
            print(target)
        else:
            change_directory(collapse_tilde(args[0]), state)
    except (DirectoryChangeError, PreviousDirectoryUnavailable) as e:
        print(f"cd: {e}", file=sys.stderr)


def builtin_history(state):
    """Show command history"""
    for i, entry in enumerate(state.history, 1):
        print(f"{i}: {entry}")


def builtin_exit(history_mgr, state):
    """Persist history before leaving"""
    try:
        history_mgr.save(state.history)
    except HistoryIOError as e:
        print(f"Warning: Could not save history: {e}", file=sys.stderr)
    print("Exiting.")


def execute_builtin(command, history_mgr, state):
    """
    Run `command` if it names a built-in.
    Returns a BuiltinResult telling the loop what to do next.
    """
    name, args = command.name, command.args

    if name == "cd":
        builtin_cd(args, state)
    elif name == "history":
        builtin_history(state)
    elif name == "help":
        builtin_help()
    elif name == "exit":
        builtin_exit(history_mgr, state)
        return BuiltinResult.HANDLED_EXIT
    else:
        return BuiltinResult.NOT_HANDLED

    return BuiltinResult.HANDLED_CONTINUE
