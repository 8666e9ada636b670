"""pmsh - a small interactive shell with persistent history."""

__version__ = "0.1.0"
