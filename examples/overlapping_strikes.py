import logging

import miditrack
import miditrack.event

logging.basicConfig(level=logging.INFO)

PIANO_CHANNEL = 0
DRUM_CHANNEL = 9

# Two strikes of middle C before either is released. The first release ends
# the second strike, so the notes come out as 0-100 and 0-200.
piano = miditrack.build_track([
	miditrack.event.program_change(0, channel=PIANO_CHANNEL, instrument=0),
	miditrack.event.lyric(0, "Ah"),
	miditrack.event.note_on(0, channel=PIANO_CHANNEL, note=60, velocity=80),
	miditrack.event.note_on(0, channel=PIANO_CHANNEL, note=60, velocity=90),
	miditrack.event.note_off(100, channel=PIANO_CHANNEL, note=60),
	miditrack.event.note_on(200, channel=PIANO_CHANNEL, note=60, velocity=0),
], track_number=0)

# No program change needed: a first note on channel 9 makes this a percussion track.
drums = miditrack.build_track([
	miditrack.event.note_on(0, channel=DRUM_CHANNEL, note=36, velocity=100),
	miditrack.event.note_off(50, channel=DRUM_CHANNEL, note=36),
	miditrack.event.note_on(100, channel=DRUM_CHANNEL, note=38, velocity=100),
], track_number=1)

for track in (piano, drums):
	print(f"{track.instrument_name}:")
	print(track)

for event in piano.to_events():
	print(event.start_time, event.message_type, event.note, event.velocity)

miditrack.write_tracks([piano, drums], "overlapping_strikes.mid")
