"""
Persistent command history.

The file holds one entry per line, oldest first. The manager never keeps
state of its own: the caller owns the in-memory list and hands it in.
"""

import logging
import os
from typing import List, Optional

from pmsh.config import HISTORY_FILENAME, MAX_HISTORY
from pmsh.exceptions import HistoryIOError, HomeResolutionError
from pmsh.path_utils import home_dir

# Entries are separated by "\n" only; undecodable bytes round-trip as-is
FILE_OPTIONS = {"encoding": "utf-8", "errors": "surrogateescape", "newline": "\n"}


def split_entries(content):
    """Split file content into lines on "\n" alone, ignoring the final newline."""
    entries = content.split("\n")
    if entries and entries[-1] == "":
        entries.pop()
    return entries


class HistoryManager:
    def __init__(
        self,
        home: Optional[str] = None,
        max_size: int = MAX_HISTORY,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._logger = logger or logging.getLogger(__name__)
        home = home or home_dir()
        if not home:
            raise HomeResolutionError("Failed to get HOME environment variable")
        self.history_file = os.path.join(home, HISTORY_FILENAME)
        self.max_size = max_size
        self._logger.debug(f"History file: {self.history_file}")

    def load(self) -> List[str]:
        """Read the history file; a missing file is an empty history."""
        if not os.path.exists(self.history_file):
            return []
        try:
            with open(self.history_file, "r", **FILE_OPTIONS) as f:
                entries = split_entries(f.read())
        except (OSError, UnicodeError) as e:
            raise HistoryIOError(f"Failed to read history file: {e}") from e

        if len(entries) > self.max_size:
            entries = entries[-self.max_size:]
        self._logger.debug(f"Loaded {len(entries)} history entries")
        return entries

    def save(self, history: List[str]) -> None:
        """Overwrite the history file with the given entries."""
        try:
            with open(self.history_file, "w", **FILE_OPTIONS) as f:
                for entry in history:
                    f.write(entry + "\n")
        except (OSError, UnicodeError) as e:
            raise HistoryIOError(f"Failed to write history file: {e}") from e
        self._logger.debug(f"Saved {len(history)} history entries")

    def add_entry(self, entry: str, history: List[str]) -> None:
        """
        Append an entry, evict from the front past capacity, then persist.

        The list is updated in place even when the save fails, so the
        next successful save writes it out.
        """
        history.append(entry)
        overflow = len(history) - self.max_size
        if overflow > 0:
            del history[:overflow]
            self._logger.debug(f"Evicted {overflow} oldest history entries")
        self.save(history)
