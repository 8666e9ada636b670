from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Command:
    """One parsed input line: program or built-in name plus its arguments."""

    name: str
    args: Tuple[str, ...] = ()

    def argv(self):
        return [self.name, *self.args]


def parse_command(line: str) -> Optional[Command]:
    """
    Split a line into a Command on runs of whitespace.
    Returns None for empty or whitespace-only lines.

    Quotes and backslashes are not interpreted: `echo "a b"` gives
    the two arguments '"a' and 'b"'.
    """
    tokens = line.split()
    if not tokens:
        return None
    return Command(tokens[0], tuple(tokens[1:]))
