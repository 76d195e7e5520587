# (c) Copyright Datacraft, 2026
"""Logging setup from a YAML ``dictConfig`` file."""
import logging
from logging.config import dictConfig
from pathlib import Path

import yaml

from airscan.config import get_settings

logger = logging.getLogger(__name__)


def configure_logging(path: str | Path | None = None) -> bool:
	"""Apply the logging configuration found at ``path``.

	Falls back to the ``log_config`` setting (``ESCL_LOG_CONFIG``). Returns
	False when there is no such file.
	"""
	if path is None:
		path = get_settings().log_config
	if not path:
		return False

	logging_config_path = Path(path)
	if not (logging_config_path.exists() and logging_config_path.is_file()):
		logger.debug("Logging config %s not found", logging_config_path)
		return False

	with open(logging_config_path, "r") as stream:
		config = yaml.load(stream, Loader=yaml.FullLoader)

	dictConfig(config)
	return True
