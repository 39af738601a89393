import logging
import pathlib

import pytest

import miditrack.config


def test_missing_file_gives_defaults (tmp_path: pathlib.Path, caplog: pytest.LogCaptureFixture) -> None:

	"""A missing config file logs a warning and returns defaults."""

	with caplog.at_level(logging.WARNING, logger="miditrack.config"):
		config = miditrack.config.load_config(str(tmp_path / "config.yaml"))

	assert config == miditrack.config.Config()
	assert "not found" in caplog.text


def test_values_override_defaults (tmp_path: pathlib.Path) -> None:

	"""Keys in the YAML file set the matching fields."""

	path = tmp_path / "config.yaml"
	path.write_text("log_level: DEBUG\nwarn_open_notes: false\noutput_filename: out.mid\n")

	config = miditrack.config.load_config(str(path))

	assert config.log_level == "DEBUG"
	assert config.warn_open_notes is False
	assert config.output_filename == "out.mid"


def test_unknown_keys_are_ignored (tmp_path: pathlib.Path, caplog: pytest.LogCaptureFixture) -> None:

	"""Unknown keys are logged and dropped."""

	path = tmp_path / "config.yaml"
	path.write_text("log_level: ERROR\ncolour: blue\n")

	with caplog.at_level(logging.WARNING, logger="miditrack.config"):
		config = miditrack.config.load_config(str(path))

	assert config.log_level == "ERROR"
	assert "colour" in caplog.text


def test_empty_file_gives_defaults (tmp_path: pathlib.Path) -> None:

	"""An empty YAML document is treated as no settings."""

	path = tmp_path / "config.yaml"
	path.write_text("")

	assert miditrack.config.load_config(str(path)) == miditrack.config.Config()


def test_non_mapping_raises (tmp_path: pathlib.Path) -> None:

	"""A YAML list is not a valid config."""

	path = tmp_path / "config.yaml"
	path.write_text("- a\n- b\n")

	with pytest.raises(ValueError):
		miditrack.config.load_config(str(path))
