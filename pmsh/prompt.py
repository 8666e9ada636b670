import os

import psutil

from pmsh import colors
from pmsh.path_utils import expand_home


def current_user():
    """Login name from the environment, else the owner of this process."""
    user = os.getenv("USER") or os.getenv("USERNAME")
    if user:
        return user
    try:
        return psutil.Process().username()
    except psutil.Error:
        return "user"


def format_prompt_with(cwd, user):
    """Build '<user>:<cwd>$ ' with the home directory shown as '~'."""
    return f"{user}:{expand_home(cwd)}$ "


def _readline_safe(code):
    # readline must not count escape sequences towards the prompt width
    return f"\001{code}\002"


def format_prompt():
    """Prompt for the live user and working directory."""
    try:
        cwd = os.getcwd()
    except OSError:
        cwd = "."
    user = current_user()

    if not colors.enabled():
        return format_prompt_with(cwd, user)

    reset = _readline_safe(colors.RESET)
    return (
        f"{_readline_safe(colors.GREEN)}{user}{reset}:"
        f"{_readline_safe(colors.BLUE)}{expand_home(cwd)}{reset}$ "
    )
