import typing


SCALE_INTERVALS: typing.Dict[str, typing.List[int]] = {
	"chromatic": [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11],
	"major": [0, 2, 4, 5, 7, 9, 11],
	"minor": [0, 2, 3, 5, 7, 8, 10],
	"dorian": [0, 2, 3, 5, 7, 9, 10],
	"phrygian": [0, 1, 3, 5, 7, 8, 10],
	"lydian": [0, 2, 4, 6, 7, 9, 11],
	"mixolydian": [0, 2, 4, 5, 7, 9, 10],
	"locrian": [0, 1, 3, 5, 6, 8, 10],
	"major_pentatonic": [0, 2, 4, 7, 9],
	"minor_pentatonic": [0, 3, 5, 7, 10],
	"blues": [0, 3, 5, 6, 7, 10],
}


SCALE_NAMES: typing.Dict[str, str] = {
	"chromatic": "Chromatic",
	"major": "Major",
	"minor": "Minor",
	"dorian": "Dorian",
	"phrygian": "Phrygian",
	"lydian": "Lydian",
	"mixolydian": "Mixolydian",
	"locrian": "Locrian",
	"major_pentatonic": "Major Pentatonic",
	"minor_pentatonic": "Minor Pentatonic",
	"blues": "Blues",
}


NOTE_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

MIDI_NOTE_MIN = 0
MIDI_NOTE_MAX = 127


def _normalise_name (name: str) -> str:

	"""Lower-case a scale name and turn spaces and hyphens into underscores."""

	return name.strip().lower().replace("-", "_").replace(" ", "_")


def scale_key (name: str) -> str:

	"""
	Normalise a scale name to its registry key.

	Accepts registry keys (``"minor_pentatonic"``) and display names
	(``"Minor Pentatonic"``, ``"minor-pentatonic"``).
	"""

	key = _normalise_name(name)

	if key not in SCALE_INTERVALS:
		raise ValueError(f"Unknown scale '{name}'. Available: {sorted(SCALE_INTERVALS)}")

	return key


def get_intervals (name: str) -> typing.List[int]:

	"""
	Return the semitone offsets of a named scale.
	"""

	return list(SCALE_INTERVALS[scale_key(name)])


def register_scale (name: str, intervals: typing.List[int], display_name: typing.Optional[str] = None) -> None:

	"""
	Register a custom scale for use by the generator.

	Parameters:
		name: Registry key (e.g. ``"hirajoshi"``). Spaces and hyphens become
			underscores.
		intervals: Semitone offsets from the root, each 0-11.
		display_name: Human-readable name. Defaults to a title-cased key.

	Example:
		```python
		register_scale("hirajoshi", [0, 2, 3, 7, 8])
		params = GeneratorParams(scale="hirajoshi", ...)
		```
	"""

	key = _normalise_name(name)

	if not key:
		raise ValueError("Scale name cannot be empty")

	if not intervals:
		raise ValueError("Intervals cannot be empty")

	if any(i < 0 or i > 11 for i in intervals):
		raise ValueError(f"Scale offsets must be 0-11, got {intervals}")

	if len(set(intervals)) != len(intervals):
		raise ValueError(f"Scale offsets contain duplicates: {intervals}")

	SCALE_INTERVALS[key] = sorted(intervals)
	SCALE_NAMES[key] = display_name or key.replace("_", " ").title()


def scale_degree (pitch: int, root_note: int) -> int:

	"""Semitone distance (0-11) of a pitch above the root's pitch class."""

	return ((pitch - root_note) % 12 + 12) % 12


def pitch_pool (root_note: int, intervals: typing.Sequence[int], pitch_range: int) -> typing.List[int]:

	"""
	Return every MIDI pitch that belongs to the scale and lies within range.

	A pitch qualifies when its scale degree relative to ``root_note`` is one of
	``intervals`` and it falls within ``root_note ± pitch_range``. The result is
	ascending; the generator selects from it by index.

	An empty list is a valid result (e.g. ``pitch_range=0`` with a root that is
	not a member of its own scale).

	Example:
		```python
		pitch_pool(60, [0, 3, 5, 7, 10], 5)  # → [55, 58, 60, 63, 65]
		```
	"""

	low = root_note - pitch_range
	high = root_note + pitch_range
	degrees = set(intervals)

	return [
		n for n in range(MIDI_NOTE_MIN, MIDI_NOTE_MAX + 1)
		if low <= n <= high and scale_degree(n, root_note) in degrees
	]


def note_name (pitch: int) -> str:

	"""
	Convert a MIDI note number to a human-readable name.

	Examples: 60 → ``"C4"``, 42 → ``"F#2"``, 36 → ``"C2"``.
	"""

	octave = (pitch // 12) - 1
	return f"{NOTE_NAMES[pitch % 12]}{octave}"
