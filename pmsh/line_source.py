"""
Line sources feed the REPL one line at a time.

Any object with `read_line(prompt) -> LineEvent` and `add_history(line)`
can drive the loop. ReadlineLineSource is the interactive terminal,
ScriptLineSource replays lines from a file.
"""

import logging
import os
import readline
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from pmsh.config import MAX_HISTORY
from pmsh.history import FILE_OPTIONS, split_entries
from pmsh.path_utils import collapse_tilde

logger = logging.getLogger(__name__)


class EventKind(Enum):
    LINE = "line"
    INTERRUPT = "interrupt"
    EOF = "eof"


@dataclass(frozen=True)
class LineEvent:
    kind: EventKind
    text: str = ""

    @classmethod
    def line(cls, text):
        return cls(EventKind.LINE, text)

    @classmethod
    def interrupt(cls):
        return cls(EventKind.INTERRUPT)

    @classmethod
    def eof(cls):
        return cls(EventKind.EOF)


def path_matches(text: str) -> List[str]:
    """
    Filesystem entries starting with `text`, in the form they were typed.
    Directories get a trailing '/'.
    """
    dirname, prefix = os.path.split(text)
    search_dir = collapse_tilde(dirname) if dirname else "."
    try:
        names = sorted(os.listdir(search_dir))
    except OSError:
        return []

    matches = []
    for name in names:
        if not name.startswith(prefix):
            continue
        # hidden files only when asked for
        if name.startswith(".") and not prefix.startswith("."):
            continue
        candidate = os.path.join(dirname, name) if dirname else name
        if os.path.isdir(os.path.join(search_dir, name)):
            candidate += "/"
        matches.append(candidate)
    return matches


class PathCompleter:
    """readline completer over file names."""

    def __init__(self):
        self._matches = []

    def complete(self, text, state):
        if state == 0:
            self._matches = path_matches(text)
        if state < len(self._matches):
            return self._matches[state]
        return None


def init_readline():
    """Configure readline to behave like a Linux terminal"""
    if not sys.stdin.isatty():
        logger.debug("stdin is not a terminal, skipping readline key bindings")
        return

    try:
        readline.set_completer(PathCompleter().complete)
        readline.set_completer_delims(" \t\n")
        readline.parse_and_bind("tab: complete")

        # Arrow keys browse history
        readline.parse_and_bind("\\e[A: previous-history")
        readline.parse_and_bind("\\e[B: next-history")

        # Ctrl+Left/Right jump between words
        readline.parse_and_bind("\\e[1;5D: backward-word")
        readline.parse_and_bind("\\e[1;5C: forward-word")

        readline.parse_and_bind("set editing-mode emacs")
        readline.parse_and_bind("set show-all-if-ambiguous on")
    except Exception as e:
        print(f"Warning: Could not configure readline: {e}", file=sys.stderr)


class ReadlineLineSource:
    """Interactive input with line editing and in-session recall."""

    def __init__(self, history: Optional[Iterable[str]] = None) -> None:
        init_readline()
        # lines are added explicitly through add_history()
        readline.set_auto_history(False)
        readline.clear_history()
        readline.set_history_length(MAX_HISTORY)
        for entry in history or ():
            readline.add_history(entry)

    def read_line(self, prompt: str) -> LineEvent:
        try:
            return LineEvent.line(input(prompt))
        except KeyboardInterrupt:
            print("^C")
            return LineEvent.interrupt()
        except EOFError:
            print()
            return LineEvent.eof()
        except UnicodeDecodeError as e:
            print(f"Warning: Could not decode input: {e}", file=sys.stderr)
            return LineEvent.interrupt()

    def add_history(self, line: str) -> None:
        readline.add_history(line)


class ScriptLineSource:
    """Replays a fixed list of lines, then reports end-of-input."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)

    @classmethod
    def from_file(cls, path):
        with open(path, "r", **FILE_OPTIONS) as f:
            return cls(split_entries(f.read()))

    def read_line(self, prompt: str) -> LineEvent:
        line = next(self._lines, None)
        if line is None:
            return LineEvent.eof()
        return LineEvent.line(line)

    def add_history(self, line: str) -> None:
        pass
