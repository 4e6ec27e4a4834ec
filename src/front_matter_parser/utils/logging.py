"""
Logging configuration module.

Provides logging setup for the command line tool. Library modules only
create loggers with ``logging.getLogger(__name__)`` and never configure
handlers themselves.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "warning") -> None:
	"""
	Configure basic logging with level and format.

	Parameters:
		level: Log level string (e.g., "info", "debug", "warning").
	"""
	lvl = logging.getLevelName(level.upper())
	if not isinstance(lvl, int):
		lvl = logging.WARNING
	logging.basicConfig(level=lvl, format=LOG_FORMAT)
	logging.getLogger("front_matter_parser").setLevel(lvl)


def get_logger(name: str) -> logging.Logger:
	"""
	Get a logger for the specified module.

	Parameters:
		name: The logger name, typically __name__.

	Returns:
		Configured logger instance.
	"""
	return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "LOG_FORMAT"]
