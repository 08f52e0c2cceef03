"""Deterministic note-sequence generation.

``generate()`` walks a grid of sixteenth-note steps and, for each step, draws
from a ``SeededRandom`` stream to decide whether a note starts there and, if so,
its length, pitch, velocity and humanized timing. The draw order is fixed, and
the jitter values are drawn even when ``humanize`` is zero, so a seed maps to
the same rhythm and pitches however the humanize knob is set.

```python
params = GeneratorParams(bars=2, scale="dorian", seed=7)
notes = generate(params)
```
"""

import dataclasses
import logging
import math
import random
import typing

import midimorph.constants.ticks
import midimorph.constants.velocity
import midimorph.intervals
import midimorph.random_stream


logger = logging.getLogger(__name__)


@dataclasses.dataclass (frozen=True)
class GeneratorParams:

	"""
	Musical parameters for one generation call.

	Attributes:
		bars: Pattern length in bars (16 steps per bar).
		tempo: Beats per minute. Only used when exporting or previewing.
		root_note: MIDI pitch of the scale root (60 = C4).
		scale: Scale name - a key of ``intervals.SCALE_INTERVALS`` or its
			display name.
		density: Probability (0-1) that a note starts on any given step.
		velocity_min: Lowest drawn velocity.
		velocity_max: Highest drawn velocity.
		pitch_range: Pitches stay within ``root_note ± pitch_range``.
		note_length_min: Shortest note, in steps.
		note_length_max: Longest note, in steps.
		humanize: Jitter intensity (0-1) for velocity, timing and duration.
		chaos: Reserved. Carried through but has no effect on generation.
		seed: Seed for the random stream. ``None`` picks a fresh seed on
			each call.
	"""

	bars: int = 4
	tempo: int = 120
	root_note: int = 60
	scale: str = "minor_pentatonic"
	density: float = 0.5
	velocity_min: int = 60
	velocity_max: int = 100
	pitch_range: int = 12
	note_length_min: int = 1
	note_length_max: int = 4
	humanize: float = 0.1
	chaos: float = 0.2
	seed: typing.Optional[int] = None

	@property
	def total_steps (self) -> int:

		"""Number of grid steps in the pattern."""

		return self.bars * midimorph.constants.ticks.STEPS_PER_BAR

	@property
	def total_ticks (self) -> int:

		"""Pattern length in ticks."""

		return self.total_steps * midimorph.constants.ticks.TICKS_PER_STEP

	@property
	def intervals (self) -> typing.List[int]:

		"""Semitone offsets of the selected scale."""

		return midimorph.intervals.get_intervals(self.scale)

	def pitch_pool (self) -> typing.List[int]:

		"""Eligible pitches for these parameters, ascending."""

		return midimorph.intervals.pitch_pool(self.root_note, self.intervals, self.pitch_range)

	def reseed (self, rng: typing.Optional[random.Random] = None) -> "GeneratorParams":

		"""Return a copy of these parameters with a new random seed."""

		return dataclasses.replace(self, seed=_new_seed(rng))


@dataclasses.dataclass (frozen=True)
class MidiNote:

	"""
	A single generated note. Times are in ticks (480 per quarter note).
	"""

	pitch: int
	velocity: int
	start_time: int
	duration: int

	@property
	def lane_index (self) -> int:

		"""Piano-roll lane for this note (the pitch itself)."""

		return self.pitch

	@property
	def end_time (self) -> int:

		"""Tick at which the note is released."""

		return self.start_time + self.duration


def _new_seed (rng: typing.Optional[random.Random] = None) -> int:

	if rng is None:
		rng = random.Random()

	return rng.randint(1, midimorph.random_stream.MODULUS - 1)


def generate (params: GeneratorParams) -> typing.List[MidiNote]:

	"""
	Generate the note sequence for a parameter set.

	The same parameters (including ``seed``) always produce the same notes.
	When ``params.seed`` is ``None`` a seed is chosen at random and logged so
	the result can be reproduced.

	Returns an empty list when no pitch satisfies both the scale and the pitch
	range.
	"""

	seed = params.seed

	if seed is None:
		seed = _new_seed()
		logger.info(f"No seed given - using seed {seed}")

	pool = params.pitch_pool()

	if not pool:
		logger.warning(
			f"Empty pitch pool for root {params.root_note}, scale '{params.scale}', "
			f"range ±{params.pitch_range} - no notes generated"
		)
		return []

	rng = midimorph.random_stream.SeededRandom(seed)
	ticks_per_step = midimorph.constants.ticks.TICKS_PER_STEP
	max_timing_jitter = midimorph.constants.ticks.MAX_TIMING_JITTER
	velocity_span = midimorph.constants.velocity.HUMANIZE_VELOCITY_SPAN
	total_steps = params.total_steps

	notes: typing.List[MidiNote] = []

	for i in range(total_steps):

		if rng.random() > params.density:
			continue

		length_steps = rng.random_int(params.note_length_min, params.note_length_max)

		# Crop notes that would run past the end of the pattern.
		if i + length_steps > total_steps:
			length_steps = total_steps - i

		pitch = rng.choice(pool)

		velocity: float = rng.random_int(params.velocity_min, params.velocity_max)

		# The jitter draws below are always taken to keep the stream in step.
		velocity_jitter = rng.random()
		if params.humanize > 0:
			velocity += (velocity_jitter - 0.5) * velocity_span * params.humanize

		start_tick: float = i * ticks_per_step
		timing_offset = rng.random()
		if params.humanize > 0:
			start_tick += (timing_offset - 0.5) * max_timing_jitter * params.humanize

		duration_factor = 0.9 + rng.random() * 0.1 * params.humanize
		duration = math.floor(length_steps * ticks_per_step * duration_factor)

		notes.append(MidiNote(
			pitch = pitch,
			velocity = _clamp_velocity(velocity),
			start_time = math.floor(max(0.0, start_tick)),
			duration = duration
		))

	logger.debug(f"Generated {len(notes)} notes over {total_steps} steps (seed {seed})")

	return notes


def _clamp_velocity (velocity: float) -> int:

	low = midimorph.constants.velocity.MIN_NOTE_VELOCITY
	high = midimorph.constants.velocity.MAX_VELOCITY

	return max(low, min(high, math.floor(velocity)))
