"""MIDI velocity constants.

Velocity is the MIDI attack strength (0-127). A note-on with velocity 0 is read
as a note-off by most receivers, so generated notes never go below 1.
"""

MAX_VELOCITY = 127

# Lowest velocity a generated note may carry.
MIN_NOTE_VELOCITY = 1

# Velocity jitter span at humanize = 1.0 (+/- half of this).
HUMANIZE_VELOCITY_SPAN = 20
