from __future__ import annotations

from conterm.logging import Logger, LogLevel

__all__ = ["LOGGER", "LogLevel", "set_verbose"]

LOGGER = Logger(fmt="[{code}] {msg}", min_level=LogLevel.Warn)
"""Package logger. Only warnings and errors are shown unless `set_verbose` is called."""

def set_verbose(verbose: bool = True):
    LOGGER.min_level = LogLevel.Info if verbose else LogLevel.Warn
