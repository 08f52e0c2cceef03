"""
MIDI Morph - seeded generative MIDI patterns for Python.

Give it a scale, a tempo and a handful of knobs (density, pitch range, note
lengths, velocity range, humanize) and it produces a note pattern on a
sixteenth-note grid. The same parameters and seed always give the same notes,
and the pattern exports to a format 0 Standard MIDI File byte for byte.

- **Reproducible randomness.** A Park-Miller stream drives every decision, in a
  fixed draw order, so a seed means the same pattern everywhere.
- **Scale-aware pitches.** Eleven built-in scales plus ``register_scale()``
  for your own; pitches stay within ``root ± pitch_range``.
- **Humanize.** Velocity, timing and duration jitter that never changes which
  steps get notes.
- **Export.** ``encode()`` returns the ``.mid`` bytes; ``save()`` writes them.
- **Terminal tools.** ASCII piano roll, MIDI-port preview and a command line
  (``python -m midimorph``) driven by a YAML config.

Minimal example:

    ```python
    import midimorph

    params = midimorph.GeneratorParams(bars=2, scale="dorian", density=0.6, seed=42)
    notes = midimorph.generate(params)
    midimorph.save(notes, params.tempo, "pattern.mid")
    ```

Package-level exports: ``GeneratorParams``, ``MidiNote``, ``generate``,
``encode``, ``save``, ``register_scale``.
"""

import midimorph.generator
import midimorph.intervals
import midimorph.midi_file


GeneratorParams = midimorph.generator.GeneratorParams
MidiNote = midimorph.generator.MidiNote
generate = midimorph.generator.generate
encode = midimorph.midi_file.encode
save = midimorph.midi_file.save
register_scale = midimorph.intervals.register_scale
