"""Constants for MIDI Morph.

- ``midimorph.constants.ticks`` - Tick-based timing (480 PPQ output resolution)
- ``midimorph.constants.velocity`` - MIDI velocity bounds and defaults

Tick constants are re-exported here, so ``midimorph.constants.PPQ`` works.
"""

PPQ = 480
TICKS_PER_STEP = 120
STEPS_PER_BEAT = 4
STEPS_PER_BAR = 16
TICKS_PER_BAR = 1920
