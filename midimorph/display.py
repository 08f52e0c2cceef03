"""ASCII piano-roll rendering of a generated note list.

One row per pitch (highest at the top), one column per sixteenth-note step,
with a bar line every 16 steps (half bars shown)::

	  D#4 |. . . X - - . . | . o . . . . . .|
	  C4  |O . . . . . . o | - . . . X . . .|

Cells show the velocity band of a note starting on that step (``.`` for
nothing, ``o`` soft, ``O`` medium, ``X`` loud) and ``-`` while it sustains.
"""

import shutil
import typing

import midimorph.constants.ticks
import midimorph.generator
import midimorph.intervals


_LABEL_WIDTH = 5
_MIN_TERMINAL_WIDTH = 20
_SUSTAIN = -1
_EMPTY_MESSAGE = "No notes generated"


def velocity_char (velocity: int) -> str:

	"""Map a MIDI velocity (0-127) to a single ASCII character.

	Returns:
		``"-"`` for sustain (note still sounding), ``"."`` for
		no hit (0), ``"o"`` for soft (1-70), ``"O"`` for
		medium (71-100), ``"X"`` for loud (101-127).
	"""

	if velocity == _SUSTAIN:
		return "-"
	if velocity <= 0:
		return "."
	if velocity <= 70:
		return "o"
	if velocity <= 100:
		return "O"
	return "X"


def _fit_columns (steps: int, term_width: int) -> int:

	"""Number of step columns that fit in the terminal.

	Each column takes 2 characters, plus the label, pipes and one extra
	character per bar line.
	"""

	overhead = 2 + _LABEL_WIDTH + 2
	available = term_width - overhead

	if available <= 0:
		return 0

	steps_per_bar = midimorph.constants.ticks.STEPS_PER_BAR
	cols = min(steps, (available + 1) // 2)

	# Bar separators take "| " each.
	while cols > 0 and cols * 2 - 1 + 2 * ((cols - 1) // steps_per_bar) > available:
		cols -= 1

	return cols


def build_velocity_grid (
	notes: typing.Sequence[midimorph.generator.MidiNote],
	steps: int
) -> typing.Dict[int, typing.List[int]]:

	"""Build a ``{pitch: [velocity_per_step]}`` dict.

	Notes are placed on the step nearest to their start tick,
	so humanized timing does not shift them between columns. Sustain markers
	fill the steps a note is still sounding.
	"""

	ticks_per_step = midimorph.constants.ticks.TICKS_PER_STEP
	grid: typing.Dict[int, typing.List[int]] = {}

	for note in notes:

		slot = int(round(note.start_time / ticks_per_step))

		if slot < 0 or slot >= steps:
			continue

		row = grid.setdefault(note.lane_index, [0] * steps)

		if note.velocity > row[slot]:
			row[slot] = note.velocity

		for s in range(slot + 1, steps):
			if s * ticks_per_step >= note.end_time:
				break
			if row[s] == 0:
				row[s] = _SUSTAIN

	return grid


def render_piano_roll (
	notes: typing.Sequence[midimorph.generator.MidiNote],
	bars: int,
	term_width: typing.Optional[int] = None
) -> typing.List[str]:

	"""Render notes as piano-roll lines, highest pitch first.

	Parameters:
		notes: Notes to draw.
		bars: Pattern length in bars; sets the number of columns.
		term_width: Available width. Defaults to the terminal width.

	Returns:
		Lines without trailing newlines. An empty note list renders a single
		"No notes generated" line.
	"""

	if not notes:
		return [_EMPTY_MESSAGE]

	if term_width is None:
		term_width = shutil.get_terminal_size(fallback=(80, 24)).columns

	if term_width < _MIN_TERMINAL_WIDTH:
		return []

	steps = bars * midimorph.constants.ticks.STEPS_PER_BAR
	display_cols = _fit_columns(steps, term_width)
	grid = build_velocity_grid(notes, steps)

	if not grid:
		return [_EMPTY_MESSAGE]

	steps_per_bar = midimorph.constants.ticks.STEPS_PER_BAR

	lines: typing.List[str] = []

	for pitch in range(max(grid), min(grid) - 1, -1):

		row = grid.get(pitch, [0] * steps)[:display_cols]
		bars_text = []

		for start in range(0, len(row), steps_per_bar):
			bars_text.append(" ".join(velocity_char(v) for v in row[start:start + steps_per_bar]))

		label = midimorph.intervals.note_name(pitch).ljust(_LABEL_WIDTH)
		lines.append(f"  {label}|{' | '.join(bars_text)}|")

	return lines


def summary_line (params: midimorph.generator.GeneratorParams, notes: typing.Sequence[midimorph.generator.MidiNote]) -> str:

	"""One-line description of a generated pattern.

	Example::

		120 BPM  C4 Minor Pentatonic  4 bars  seed 42  23 notes
	"""

	scale = midimorph.intervals.SCALE_NAMES[midimorph.intervals.scale_key(params.scale)]
	root = midimorph.intervals.note_name(params.root_note)
	seed = "random" if params.seed is None else params.seed

	return f"{params.tempo} BPM  {root} {scale}  {params.bars} bars  seed {seed}  {len(notes)} notes"
