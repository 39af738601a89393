"""Reading and writing Standard MIDI Files through ``mido``.

``mido`` handles the byte-level format (chunks, variable-length quantities,
running status). This module only converts between ``mido`` messages, which
carry delta times, and ``MidiEvent`` records, which carry absolute ticks.
"""

import logging
import typing

import mido

import miditrack.constants
import miditrack.event
import miditrack.track


logger = logging.getLogger(__name__)


def event_from_message (message: typing.Union[mido.Message, mido.MetaMessage], start_time: int) -> miditrack.event.MidiEvent:

	"""
	Convert one ``mido`` message to a ``MidiEvent`` at an absolute tick.

	Messages other than notes, program changes and lyrics keep their type name
	and channel (0 when they have none) and are otherwise empty.
	"""

	if message.type in (miditrack.event.NOTE_ON, miditrack.event.NOTE_OFF):
		return miditrack.event.MidiEvent(
			start_time = start_time,
			message_type = message.type,
			channel = message.channel,
			note = message.note,
			velocity = message.velocity,
			delta_time = message.time
		)

	if message.type == miditrack.event.PROGRAM_CHANGE:
		return miditrack.event.MidiEvent(
			start_time = start_time,
			message_type = message.type,
			channel = message.channel,
			instrument = message.program,
			delta_time = message.time
		)

	if message.type == miditrack.event.LYRICS:
		return miditrack.event.MidiEvent(
			start_time = start_time,
			message_type = message.type,
			data = message.text,
			delta_time = message.time
		)

	return miditrack.event.MidiEvent(
		start_time = start_time,
		message_type = message.type,
		channel = getattr(message, 'channel', 0),
		delta_time = message.time
	)


def events_from_mido_track (mido_track: typing.Iterable[typing.Union[mido.Message, mido.MetaMessage]]) -> typing.List[miditrack.event.MidiEvent]:

	"""
	Convert a ``mido`` track to events, accumulating delta times into absolute ticks.
	"""

	events: typing.List[miditrack.event.MidiEvent] = []
	tick = 0

	for message in mido_track:
		tick += message.time
		events.append(event_from_message(message, tick))

	return events


def message_from_event (event: miditrack.event.MidiEvent, delta_time: int) -> typing.Optional[typing.Union[mido.Message, mido.MetaMessage]]:

	"""
	Convert a ``MidiEvent`` to a ``mido`` message with the given delta time.

	Returns None for kinds that are not written (anything but notes, program
	changes and lyrics) and for instruments outside 0-127, such as the
	percussion sentinel, which have no program number.
	"""

	if event.message_type in (miditrack.event.NOTE_ON, miditrack.event.NOTE_OFF):
		return mido.Message(event.message_type, channel=event.channel, note=event.note, velocity=event.velocity, time=delta_time)

	if event.message_type == miditrack.event.PROGRAM_CHANGE:

		if not 0 <= event.instrument <= 127:
			return None

		return mido.Message('program_change', channel=event.channel, program=event.instrument, time=delta_time)

	if event.message_type == miditrack.event.LYRICS:
		return mido.MetaMessage('lyrics', text=str(event.data), time=delta_time)

	return None


def events_to_mido_track (events: typing.Iterable[miditrack.event.MidiEvent]) -> mido.MidiTrack:

	"""
	Encode events as a ``mido`` track.

	Events are sorted by absolute tick first (stable, so simultaneous events
	keep their order), because regenerated note streams are not in time order
	when notes overlap and SMF delta times cannot be negative.
	"""

	track = mido.MidiTrack()
	last_tick = 0
	skipped = 0

	for event in sorted(events, key=lambda e: e.start_time):

		delta_ticks = event.start_time - last_tick

		if delta_ticks < 0:
			delta_ticks = 0

		message = message_from_event(event, delta_ticks)

		if message is None:
			skipped += 1
			continue

		track.append(message)
		last_tick = event.start_time

	if skipped:
		logger.debug(f"Skipped {skipped} event(s) with no MIDI file encoding")

	return track


def read_tracks (path: str, warn_open_notes: bool = True) -> typing.Tuple[typing.List[miditrack.track.Track], int]:

	"""
	Read a MIDI file and build one ``Track`` per file track.

	Returns the tracks (numbered by their position in the file) and the file's
	ticks per beat. Errors opening or decoding the file propagate from ``mido``.
	"""

	mid = mido.MidiFile(path)

	tracks = [
		miditrack.track.build_track(events_from_mido_track(mido_track), track_number=i, warn_open_notes=warn_open_notes)
		for i, mido_track in enumerate(mid.tracks)
	]

	logger.info(f"Read {len(tracks)} track(s) from {path} ({mid.ticks_per_beat} ticks per beat)")

	return tracks, mid.ticks_per_beat


def track_to_events (track: miditrack.track.Track) -> typing.List[miditrack.event.MidiEvent]:

	"""
	Return the events written for one track: program change, lyrics, then regenerated notes.
	"""

	events: typing.List[miditrack.event.MidiEvent] = []

	if track.instrument != miditrack.constants.PERCUSSION_INSTRUMENT:
		channel = track.notes[0].channel if track.notes else 0
		events.append(miditrack.event.program_change(0, channel=channel, instrument=track.instrument))

	if track.lyrics:
		events.extend(track.lyrics)

	events.extend(track.to_events())

	return events


def write_tracks (tracks: typing.Sequence[miditrack.track.Track], path: str, ticks_per_beat: int = miditrack.constants.DEFAULT_TICKS_PER_BEAT) -> None:

	"""
	Write tracks to a Type 1 MIDI file, one file track per ``Track``.

	The note content is regenerated with ``Track.to_events()``, so original
	velocities, controllers and other meta events are not preserved.
	"""

	mid = mido.MidiFile(type=1, ticks_per_beat=ticks_per_beat)

	for track in tracks:
		mid.tracks.append(events_to_mido_track(track_to_events(track)))

	logger.info(f"Saving {len(tracks)} track(s) to {path}...")

	mid.save(path)
