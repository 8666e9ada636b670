import os
from typing import Optional


def home_dir() -> Optional[str]:
    """Return $HOME, or None in a homeless environment."""
    home = os.environ.get("HOME")
    if not home:
        return None
    return home.rstrip(os.sep) or os.sep


def expand_home(path: str) -> str:
    """
    Shorten a path for display: '<home>/src' -> '~/src'.
    Paths outside the home directory come back unchanged.
    """
    home = home_dir()
    if home is None:
        return path
    if path == home:
        return "~"
    if home != os.sep and path.startswith(home + os.sep):
        return "~" + path[len(home):]
    return path


def collapse_tilde(path: str) -> str:
    """
    Turn '~' or '~/x' back into a real path under the home directory.
    Anything else, relative paths and '~user' included, is returned as given.
    """
    if path != "~" and not path.startswith("~/"):
        return path
    home = home_dir()
    if home is None:
        return path
    if path == "~":
        return home
    return os.path.join(home, path[2:]) if home == os.sep else home + path[1:]
