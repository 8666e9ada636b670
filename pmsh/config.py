"""Shell-wide settings."""

SHELL_NAME = "pmsh"

# History file lives directly under the user's home directory
HISTORY_FILENAME = ".pmsh_history"
MAX_HISTORY = 1000  # oldest entries are dropped past this

# Any value disables ANSI colors (https://no-color.org)
NO_COLOR_ENV = "NO_COLOR"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
