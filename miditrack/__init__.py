"""
miditrack - turn MIDI track event streams into notes, and notes back into events.

A Standard MIDI File track is a flat list of note_on, note_off and meta
events. miditrack pairs them into discrete notes (channel, pitch, start tick,
end tick) and collects per-track metadata: the instrument and any lyrics.

- **Pairing that survives real files.** A note_on with velocity 0 ends a
  note. Overlapping strikes of the same pitch close last-opened,
  first-closed. Stray note_offs are dropped and notes without a note_off
  are kept open rather than raising.
- **Percussion detection.** A track whose first note is on channel 10
  (0-indexed 9) reports instrument 128, "Percussion".
- **Regeneration.** ``Track.to_events()`` rebuilds a note_on/note_off pair per
  note. The round trip is lossy: velocities, controllers and tempo are not kept.
- **File I/O through mido.** ``read_tracks()`` and ``write_tracks()`` convert
  between MIDI files and tracks; mido does all byte-level work.

Minimal example:

    ```python
    import miditrack

    tracks, ticks_per_beat = miditrack.read_tracks("song.mid")

    for track in tracks:
        print(track.instrument_name, len(track.notes))

    miditrack.write_tracks(tracks, "regenerated.mid", ticks_per_beat=ticks_per_beat)
    ```

Package-level exports: ``MidiEvent``, ``Note``, ``Track``, ``TrackBuilder``,
``build_track``, ``read_tracks``, ``write_tracks``.
"""

import miditrack.event
import miditrack.midi_io
import miditrack.note
import miditrack.track


MidiEvent = miditrack.event.MidiEvent
Note = miditrack.note.Note
Track = miditrack.track.Track
TrackBuilder = miditrack.track.TrackBuilder
build_track = miditrack.track.build_track
read_tracks = miditrack.midi_io.read_tracks
write_tracks = miditrack.midi_io.write_tracks
