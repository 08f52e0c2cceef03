"""Tick-based MIDI timing constants.

Generated notes are placed on a grid of sixteenth-note **steps**. Exported files
use **480 ticks per quarter note** (PPQ = 480), so one step is 120 ticks.
"""

PPQ = 480

STEPS_PER_BEAT = 4
STEPS_PER_BAR = 16

TICKS_PER_STEP = PPQ // STEPS_PER_BEAT
TICKS_PER_BAR = TICKS_PER_STEP * STEPS_PER_BAR

# Maximum humanized timing shift is half a step either side of the grid.
MAX_TIMING_JITTER = TICKS_PER_STEP // 2
