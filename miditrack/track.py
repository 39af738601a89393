"""Note extraction from a track's event stream, and event regeneration from notes.

``build_track()`` runs a single pass over time-ordered events, pairing each
note_on with a later note_off for the same channel and pitch. Overlapping
strikes of one pitch close last-opened, first-closed: a note_off always ends the
most recently opened note it matches. A note_on with velocity 0 counts as a
note_off. Unmatched note_offs are dropped and notes with no note_off stay open;
neither raises, since many real-world files are slightly malformed.

``Track.to_events()`` is the lossy inverse: one note_on/note_off pair per note,
fixed velocity, no controllers or meta events.
"""

import logging
import typing

import miditrack.constants
import miditrack.constants.instruments
import miditrack.constants.velocity
import miditrack.event
import miditrack.note


logger = logging.getLogger(__name__)


class Track:

	"""
	The notes, instrument and lyrics of one MIDI track.

	Notes are stored in note_on arrival order. The instrument is a GM program
	number (0-127) or ``PERCUSSION_INSTRUMENT`` (128). ``lyrics`` is None until
	the first lyric event is added.
	"""

	def __init__ (self, track_number: int) -> None:

		"""
		Create an empty track.
		"""

		self.track_number = track_number
		self.notes: typing.List[miditrack.note.Note] = []
		self.instrument: int = miditrack.constants.DEFAULT_INSTRUMENT
		self.lyrics: typing.Optional[typing.List[miditrack.event.MidiEvent]] = None


	@property
	def instrument_name (self) -> str:

		"""
		GM name of the instrument, ``"Percussion"`` for 128, or an empty string when out of range.
		"""

		return miditrack.constants.instruments.instrument_name(self.instrument)


	def add_note (self, note: miditrack.note.Note) -> None:

		"""
		Append a note. Called once per note_on while building.
		"""

		self.notes.append(note)


	def note_off (self, channel: int, number: int, end_time: int) -> typing.Optional[miditrack.note.Note]:

		"""
		Close the most recently added open note matching channel and number.

		Scans from the end of the note list so the latest strike of a pitch is
		closed first. Returns the closed note, or None when nothing matched (the
		note_off is discarded).
		"""

		for note in reversed(self.notes):
			if note.channel == channel and note.number == number and note.is_open:
				note.note_off(end_time)
				return note

		logger.debug(f"Discarding unmatched note_off for note {number} on channel {channel} at {end_time}")
		return None


	def add_lyric (self, event: miditrack.event.MidiEvent) -> None:

		"""
		Append a lyric event, creating the lyric list on first use.
		"""

		if self.lyrics is None:
			self.lyrics = []

		self.lyrics.append(event)


	def open_notes (self) -> typing.List[miditrack.note.Note]:

		"""
		Return the notes that never received a note_off.
		"""

		return [note for note in self.notes if note.is_open]


	def find_note_by_start (self, tick: int) -> typing.Optional[miditrack.note.Note]:

		"""
		Return the first stored note starting exactly at ``tick``, or None.
		"""

		for note in self.notes:
			if note.start_time == tick:
				return note

		return None


	def clone (self) -> "Track":

		"""
		Return a deep copy: notes are duplicated, lyric events are shared (they are immutable).
		"""

		track = Track(self.track_number)
		track.instrument = self.instrument

		for note in self.notes:
			track.notes.append(note.clone())

		if self.lyrics is not None:
			track.lyrics = list(self.lyrics)

		return track


	def to_events (self) -> typing.List[miditrack.event.MidiEvent]:

		"""
		Regenerate a note_on/note_off pair for every note, ordered by note start.

		Notes are visited in a sorted copy; the stored order is left alone. Notes
		that share a start time keep their stored relative order. Each note_off
		directly follows its note_on, so overlapping notes produce events that are
		not in time order. Velocities are fixed at 127 and open notes end where
		they start.
		"""

		events: typing.List[miditrack.event.MidiEvent] = []

		for note in sorted(self.notes, key=lambda n: n.start_time):

			end_time = note.start_time if note.end_time is None else note.end_time

			events.append(miditrack.event.note_on(
				start_time = note.start_time,
				channel = note.channel,
				note = note.number,
				velocity = miditrack.constants.velocity.REGENERATED_VELOCITY,
				delta_time = 0
			))

			events.append(miditrack.event.note_off(
				start_time = end_time,
				channel = note.channel,
				note = note.number,
				velocity = miditrack.constants.velocity.REGENERATED_VELOCITY,
				delta_time = end_time - note.start_time
			))

		return events


	def __str__ (self) -> str:

		lines = [f"Track number={self.track_number} instrument={self.instrument}"]
		lines.extend(str(note) for note in self.notes)
		lines.append("End Track")

		return "\n".join(lines) + "\n"


class TrackBuilder:

	"""
	Builds a ``Track`` from events fed in arrival order.

	The builder owns the track until ``build()`` hands it over. Open notes are
	indexed by (channel, pitch) in stacks, so a note_off pops the newest open
	strike without scanning the note list.
	"""

	def __init__ (self, track_number: int = 0) -> None:

		"""
		Start an empty build for the given track number.
		"""

		self._track = Track(track_number)
		self._open: typing.Dict[typing.Tuple[int, int], typing.List[miditrack.note.Note]] = {}
		self._built = False


	def feed (self, event: miditrack.event.MidiEvent) -> None:

		"""
		Apply one event to the track under construction.
		"""

		if self._built:
			raise RuntimeError("Track has already been built")

		if event.is_note_on():
			note = miditrack.note.Note(start_time=event.start_time, channel=event.channel, number=event.note)
			self._track.add_note(note)
			self._open.setdefault((event.channel, event.note), []).append(note)

		elif event.is_note_off():
			self._note_off(event.channel, event.note, event.start_time)

		elif event.message_type == miditrack.event.PROGRAM_CHANGE:
			self._track.instrument = event.instrument

		elif event.message_type == miditrack.event.LYRICS:
			self._track.add_lyric(event)


	def _note_off (self, channel: int, number: int, end_time: int) -> None:

		"""
		Close the newest open note for (channel, number), or drop the note_off.
		"""

		stack = self._open.get((channel, number))

		if not stack:
			logger.debug(f"Discarding unmatched note_off for note {number} on channel {channel} at {end_time}")
			return

		stack.pop().note_off(end_time)


	def build (self, warn_open_notes: bool = True) -> Track:

		"""
		Finish construction and return the track.

		A track whose first note is on the percussion channel gets the percussion
		instrument, overriding any program change.
		"""

		if self._built:
			raise RuntimeError("Track has already been built")

		self._built = True
		track = self._track

		if track.notes and track.notes[0].channel == miditrack.constants.PERCUSSION_CHANNEL:
			track.instrument = miditrack.constants.PERCUSSION_INSTRUMENT

		open_count = sum(len(stack) for stack in self._open.values())

		if open_count and warn_open_notes:
			logger.warning(f"Track {track.track_number}: {open_count} note(s) have no note_off and remain open")

		self._open = {}

		return track


def build_track (events: typing.Iterable[miditrack.event.MidiEvent], track_number: int = 0, warn_open_notes: bool = True) -> Track:

	"""
	Build a track from a time-ordered event sequence.

	Example:
		```python
		track = miditrack.track.build_track([
			miditrack.event.note_on(0, channel=0, note=60, velocity=80),
			miditrack.event.note_off(100, channel=0, note=60),
		])

		track.notes[0].duration    # 100
		```
	"""

	builder = TrackBuilder(track_number)

	for event in events:
		builder.feed(event)

	return builder.build(warn_open_notes=warn_open_notes)
