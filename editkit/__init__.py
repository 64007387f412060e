"""Small interactive commands: history replay, mark ring, compile history,
load-path management and desktop utility wrappers."""

__version__ = "0.1.0"
