"""MIDI velocity constants.

Velocity is the MIDI attack strength (0-127). A note_on with velocity 0 is a
note_off by convention (running status), so it never opens a note.
"""

# Fixed velocity used for every regenerated note_on and note_off.
REGENERATED_VELOCITY = 127

# Neutral pressure value filled into synthesized events.
NEUTRAL_PRESSURE = 64

# MIDI standard range
MIN_VELOCITY = 0
MAX_VELOCITY = 127
