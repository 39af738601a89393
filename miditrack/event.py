"""Typed MIDI event records.

A ``MidiEvent`` is one decoded channel-voice or meta message with an absolute
tick time. The ``message_type`` strings are the ``mido`` type names, so events
convert to and from ``mido`` messages without a lookup table (see
``miditrack.midi_io``).

Kinds that affect note extraction:

- ``'note_on'`` - opens a note, or closes one when velocity is 0
- ``'note_off'`` - closes a note
- ``'program_change'`` - sets the track instrument
- ``'lyrics'`` - lyric meta event, payload in ``data``

Any other ``message_type`` is carried through and ignored by the track builder.
"""

import dataclasses
import typing

import miditrack.constants.velocity


NOTE_ON = 'note_on'
NOTE_OFF = 'note_off'
PROGRAM_CHANGE = 'program_change'
LYRICS = 'lyrics'


@dataclasses.dataclass (frozen=True)
class MidiEvent:

	"""
	Represents a decoded MIDI event at an absolute tick.
	"""

	start_time: int
	message_type: str
	channel: int = 0
	note: int = 0
	velocity: int = 0
	instrument: int = 0
	data: typing.Any = None			# Lyric text or other meta payload
	delta_time: int = 0

	# Neutral values for synthesized events
	key_pressure: int = miditrack.constants.velocity.NEUTRAL_PRESSURE
	channel_pressure: int = miditrack.constants.velocity.NEUTRAL_PRESSURE
	control: int = 0
	value: int = 0
	pitch_bend: int = 0
	tempo: int = 0


	def is_note_on (self) -> bool:

		"""
		True for a note_on that starts a note (velocity above zero).
		"""

		return self.message_type == NOTE_ON and self.velocity > 0


	def is_note_off (self) -> bool:

		"""
		True for a note_off, or a note_on with velocity 0.
		"""

		return self.message_type == NOTE_OFF or (self.message_type == NOTE_ON and self.velocity == 0)


def note_on (start_time: int, channel: int, note: int, velocity: int = miditrack.constants.velocity.REGENERATED_VELOCITY, delta_time: int = 0) -> MidiEvent:

	"""
	Create a note_on event.
	"""

	return MidiEvent(
		start_time = start_time,
		message_type = NOTE_ON,
		channel = channel,
		note = note,
		velocity = velocity,
		delta_time = delta_time
	)


def note_off (start_time: int, channel: int, note: int, velocity: int = miditrack.constants.velocity.REGENERATED_VELOCITY, delta_time: int = 0) -> MidiEvent:

	"""
	Create a note_off event.
	"""

	return MidiEvent(
		start_time = start_time,
		message_type = NOTE_OFF,
		channel = channel,
		note = note,
		velocity = velocity,
		delta_time = delta_time
	)


def program_change (start_time: int, channel: int, instrument: int) -> MidiEvent:

	"""
	Create a program_change event.
	"""

	return MidiEvent(
		start_time = start_time,
		message_type = PROGRAM_CHANGE,
		channel = channel,
		instrument = instrument
	)


def lyric (start_time: int, text: str) -> MidiEvent:

	"""
	Create a lyric meta event.
	"""

	return MidiEvent(
		start_time = start_time,
		message_type = LYRICS,
		data = text
	)
