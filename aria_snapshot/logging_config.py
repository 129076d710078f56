import logging
import sys

from aria_snapshot.config import CONFIG


def setup_logging(level: str | None = None) -> logging.Logger:
	"""Attach a single stream handler to the aria_snapshot logger.

	Calling this more than once only updates the level.
	"""
	log_level = (level or CONFIG.logging_level).upper()
	logger = logging.getLogger('aria_snapshot')
	logger.setLevel(getattr(logging, log_level, logging.INFO))

	if not any(getattr(handler, '_aria_snapshot_handler', False) for handler in logger.handlers):
		handler = logging.StreamHandler(sys.stdout)
		handler.setFormatter(logging.Formatter('%(levelname)-8s [%(name)s] %(message)s'))
		handler._aria_snapshot_handler = True  # type: ignore[attr-defined]
		logger.addHandler(handler)
		logger.propagate = False

	return logger
