# LinkCanon — Logging configuration (stdout + optional rotating file)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
import logging.handlers
import os
from typing import Optional


def configure_logging(level: str = "INFO", log_dir: Optional[str] = None) -> None:
	"""Configure root logger with a stdout handler and, when log_dir is set, a rotating file.

	The format is single-line and tab-separated: time, level, logger, message.
	The library itself never calls this; applications and the CLI do.
	"""
	fmt = (
		"%(asctime)s\t%(levelname)s\t%(name)s\t%(message)s"
	)

	root = logging.getLogger()
	root.setLevel(getattr(logging, level.upper(), logging.INFO))

	# Clear existing handlers in case of re-init
	for h in list(root.handlers):
		root.removeHandler(h)

	stream = logging.StreamHandler()
	stream.setFormatter(logging.Formatter(fmt))
	root.addHandler(stream)

	if log_dir:
		os.makedirs(log_dir, exist_ok=True)
		file_handler = logging.handlers.RotatingFileHandler(
			os.path.join(log_dir, "linkcanon.log"), maxBytes=2 * 1024 * 1024, backupCount=3, encoding="utf-8"
		)
		file_handler.setFormatter(logging.Formatter(fmt))
		root.addHandler(file_handler)
