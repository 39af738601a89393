import os
import pathlib

import mido
import pytest

import miditrack.__main__


def test_main_prints_tracks (midi_file: str, tmp_path: pathlib.Path, capsys: pytest.CaptureFixture) -> None:

	"""Every track is printed with its notes."""

	status = miditrack.__main__.main([midi_file, "--config", str(tmp_path / "none.yaml")])

	out = capsys.readouterr().out

	assert status == 0
	assert "Track number=0 instrument=40" in out
	assert "Track number=1 instrument=128" in out
	assert out.count("End Track") == 2


def test_main_filters_by_track (midi_file: str, tmp_path: pathlib.Path, capsys: pytest.CaptureFixture) -> None:

	"""--track prints only the requested track."""

	miditrack.__main__.main([midi_file, "--track", "1", "--config", str(tmp_path / "none.yaml")])

	out = capsys.readouterr().out

	assert "Track number=1" in out
	assert "Track number=0" not in out


def test_main_writes_output (midi_file: str, tmp_path: pathlib.Path) -> None:

	"""--output writes a regenerated MIDI file."""

	output = str(tmp_path / "regenerated.mid")

	status = miditrack.__main__.main([midi_file, "--output", output, "--config", str(tmp_path / "none.yaml")])

	assert status == 0
	assert os.path.exists(output)
	assert len(mido.MidiFile(output).tracks) == 2


def test_main_uses_output_from_config (midi_file: str, tmp_path: pathlib.Path) -> None:

	"""output_filename in the config is used when --output is not given."""

	output = str(tmp_path / "from_config.mid")
	config_path = tmp_path / "config.yaml"
	config_path.write_text(f"output_filename: {output}\n")

	miditrack.__main__.main([midi_file, "--config", str(config_path)])

	assert os.path.exists(output)


def test_main_reports_unreadable_file (tmp_path: pathlib.Path) -> None:

	"""A file that is not MIDI gives exit status 1."""

	bad = tmp_path / "bad.mid"
	bad.write_bytes(b"not a midi file")

	assert miditrack.__main__.main([str(bad), "--config", str(tmp_path / "none.yaml")]) == 1
