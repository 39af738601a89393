import argparse
import logging
import sys
import typing

import miditrack.config
import miditrack.midi_io


logger = logging.getLogger(__name__)


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Print the notes of each track in a MIDI file, and optionally write the regenerated tracks.
	"""

	parser = argparse.ArgumentParser(prog="miditrack", description="Extract notes from MIDI file tracks")
	parser.add_argument("filename", help="MIDI file to read")
	parser.add_argument("--config", default="config.yaml", help="YAML config file (default: config.yaml)")
	parser.add_argument("--output", default=None, help="Write regenerated tracks to this MIDI file")
	parser.add_argument("--track", type=int, default=None, help="Only print this track number")
	args = parser.parse_args(argv)

	config = miditrack.config.load_config(args.config)

	logging.basicConfig(level=getattr(logging, str(config.log_level).upper(), logging.INFO))

	try:
		tracks, ticks_per_beat = miditrack.midi_io.read_tracks(args.filename, warn_open_notes=config.warn_open_notes)
	except (OSError, EOFError, ValueError) as e:
		logger.error(f"Failed to read {args.filename}: {e}")
		return 1

	for track in tracks:

		if args.track is not None and track.track_number != args.track:
			continue

		print(track)

	output = args.output or config.output_filename

	if output:
		miditrack.midi_io.write_tracks(tracks, output, ticks_per_beat=ticks_per_beat)

	return 0


if __name__ == "__main__":
	sys.exit(main())
