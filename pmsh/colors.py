import os
import sys

from pmsh.config import NO_COLOR_ENV

RESET = "\x1b[0m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
BLUE = "\x1b[34m"


def red(s):
    return f"{RED}{s}{RESET}"


def green(s):
    return f"{GREEN}{s}{RESET}"


def blue(s):
    return f"{BLUE}{s}{RESET}"


def enabled(stream=None):
    """Colors only go to a terminal, and never when NO_COLOR is set."""
    if os.environ.get(NO_COLOR_ENV) is not None:
        return False
    stream = stream or sys.stdout
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False
