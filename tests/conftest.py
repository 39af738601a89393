import pathlib
import typing

import mido
import pytest

import miditrack.event


@pytest.fixture
def overlapping_events () -> typing.List[miditrack.event.MidiEvent]:

	"""Two strikes of middle C at tick 0, released at 100 and 200."""

	return [
		miditrack.event.note_on(0, channel=0, note=60, velocity=80),
		miditrack.event.note_on(0, channel=0, note=60, velocity=90),
		miditrack.event.note_off(100, channel=0, note=60),
		miditrack.event.note_off(200, channel=0, note=60),
	]


@pytest.fixture
def drum_events () -> typing.List[miditrack.event.MidiEvent]:

	"""A single kick on the percussion channel with no program change."""

	return [
		miditrack.event.note_on(0, channel=9, note=36, velocity=100),
		miditrack.event.note_off(50, channel=9, note=36),
	]


@pytest.fixture
def midi_file (tmp_path: pathlib.Path) -> str:

	"""Write a two-track Type 1 file: a piano melody with lyrics, and a drum track."""

	filename = str(tmp_path / "song.mid")

	mid = mido.MidiFile(type=1, ticks_per_beat=480)

	melody = mido.MidiTrack()
	melody.append(mido.Message('program_change', channel=0, program=40, time=0))
	melody.append(mido.MetaMessage('lyrics', text="Hel", time=0))
	melody.append(mido.Message('note_on', channel=0, note=60, velocity=90, time=0))
	melody.append(mido.Message('note_off', channel=0, note=60, velocity=0, time=480))
	melody.append(mido.MetaMessage('lyrics', text="lo", time=0))
	melody.append(mido.Message('note_on', channel=0, note=64, velocity=90, time=0))
	melody.append(mido.Message('note_on', channel=0, note=64, velocity=0, time=240))
	mid.tracks.append(melody)

	drums = mido.MidiTrack()
	drums.append(mido.Message('note_on', channel=9, note=36, velocity=100, time=0))
	drums.append(mido.Message('note_off', channel=9, note=36, velocity=0, time=120))
	drums.append(mido.Message('note_on', channel=9, note=42, velocity=70, time=120))
	drums.append(mido.Message('note_off', channel=9, note=42, velocity=0, time=120))
	mid.tracks.append(drums)

	mid.save(filename)

	return filename
