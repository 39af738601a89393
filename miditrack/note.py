import dataclasses
import logging
import typing


logger = logging.getLogger(__name__)


PC_TO_NOTE_NAME: typing.List[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]


@dataclasses.dataclass
class Note:

	"""
	Represents one sounded pitch on a channel, timed in ticks.

	A note is open while ``end_time`` is None (its note_off has not been seen)
	and closed once ``note_off()`` sets it.
	"""

	start_time: int
	channel: int
	number: int
	end_time: typing.Optional[int] = None


	@property
	def is_open (self) -> bool:

		"""
		True until the note has been closed by a note_off.
		"""

		return self.end_time is None


	@property
	def duration (self) -> int:

		"""
		Length in ticks, or 0 for an open note.
		"""

		if self.end_time is None:
			return 0

		return self.end_time - self.start_time


	@property
	def name (self) -> str:

		"""
		Scientific pitch name with C4 = 60 (e.g. ``"C4"``, ``"F#3"``).
		"""

		return f"{PC_TO_NOTE_NAME[self.number % 12]}{self.number // 12 - 1}"


	def note_off (self, end_time: int) -> None:

		"""
		Close the note at ``end_time``.

		An end time before the start is clamped to the start so duration is never negative.
		"""

		if end_time < self.start_time:
			logger.debug(f"Clamping end time {end_time} to start {self.start_time} for note {self.number} on channel {self.channel}")
			end_time = self.start_time

		self.end_time = end_time


	def clone (self) -> "Note":

		"""
		Return an independent copy of this note.
		"""

		return dataclasses.replace(self)


	def __str__ (self) -> str:

		end = "open" if self.end_time is None else str(self.end_time)

		return f"Note channel={self.channel} number={self.number} {self.name} start={self.start_time} end={end} duration={self.duration}"
