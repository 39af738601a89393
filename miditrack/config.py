import dataclasses
import logging
import os
import typing

import yaml


logger = logging.getLogger(__name__)


@dataclasses.dataclass
class Config:

	"""
	Settings for the command line tool.
	"""

	log_level: str = "INFO"
	warn_open_notes: bool = True
	output_filename: typing.Optional[str] = None


def load_config (config_path: str = 'config.yaml') -> Config:

	"""
	Load configuration from a YAML file.

	A missing file gives the defaults. Unknown keys are logged and ignored.

	Raises:
		ValueError: If the file does not contain a mapping.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return Config()

	with open(config_path, 'r') as f:
		data = yaml.safe_load(f)

	if data is None:
		return Config()

	if not isinstance(data, dict):
		raise ValueError(f"Config file {config_path} must contain a mapping, got {type(data).__name__}")

	known = {field.name for field in dataclasses.fields(Config)}
	unknown = sorted(set(data) - known)

	if unknown:
		logger.warning(f"Ignoring unknown config keys in {config_path}: {unknown}")

	return Config(**{key: value for key, value in data.items() if key in known})
