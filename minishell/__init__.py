"""Environment entries, quote cleanup, the echo, env and cd builtins, and string helpers for a small shell."""

__version__ = "0.1.0"