"""Constants for miditrack.

This package contains:

- ``miditrack.constants.velocity`` - MIDI velocity constants
- ``miditrack.constants.instruments`` - General MIDI program names

Channel, instrument and timing constants shared by the whole package live here.
"""

# MIDI channel 10 (0-indexed channel 9) carries percussion by convention.
PERCUSSION_CHANNEL = 9

# Instrument sentinel for percussion tracks; one past the last GM program (127).
PERCUSSION_INSTRUMENT = 128

DEFAULT_INSTRUMENT = 0

# MIDI standard ranges
MIN_CHANNEL = 0
MAX_CHANNEL = 15
MIN_NOTE = 0
MAX_NOTE = 127

# Resolution written to new files. Standard is 480.
DEFAULT_TICKS_PER_BEAT = 480
