"""Generator defaults and YAML configuration.

The generator trusts its inputs, so values coming from users are sanitised
here first: numbers are coerced and clamped, swapped min/max pairs are
reordered and scale names are normalised.

A config file looks like::

	generator:
	  bars: 8
	  tempo: 96
	  root_note: 57
	  scale: Dorian
	  density: 0.6
	  seed: 1234

	output:
	  filename: pattern.mid
"""

import dataclasses
import logging
import os
import typing

import yaml

import midimorph.generator
import midimorph.intervals


logger = logging.getLogger(__name__)


DEFAULT_PARAMS = midimorph.generator.GeneratorParams(
	bars = 4,
	tempo = 120,
	root_note = 60,
	scale = "minor_pentatonic",
	density = 0.5,
	velocity_min = 60,
	velocity_max = 100,
	pitch_range = 12,
	note_length_min = 1,
	note_length_max = 4,
	humanize = 0.1,
	chaos = 0.2,
	seed = None
)

MIN_TEMPO = 20
MAX_TEMPO = 300
MAX_BARS = 64
MAX_NOTE_LENGTH = 64

_INT_FIELDS = ("bars", "tempo", "root_note", "velocity_min", "velocity_max", "pitch_range", "note_length_min", "note_length_max")
_FLOAT_FIELDS = ("density", "humanize", "chaos")


def load_config (config_path: str = 'midimorph.yaml') -> typing.Dict[str, typing.Any]:

	"""
	Load configuration from a YAML file.

	A missing file is not an error: a warning is logged and an empty mapping
	returned.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		data = yaml.safe_load(f)

	if data is None:
		return {}

	if not isinstance(data, dict):
		raise ValueError(f"Config file {config_path} must contain a mapping, got {type(data).__name__}")

	return data


def _clamp (value: typing.Any, low: float, high: float) -> typing.Any:

	return max(low, min(high, value))


def sanitize (params: midimorph.generator.GeneratorParams) -> midimorph.generator.GeneratorParams:

	"""
	Return a copy of ``params`` with every field inside its valid range.
	"""

	velocity_min = int(_clamp(int(params.velocity_min), 0, 127))
	velocity_max = int(_clamp(int(params.velocity_max), 0, 127))
	length_min = int(_clamp(int(params.note_length_min), 1, MAX_NOTE_LENGTH))
	length_max = int(_clamp(int(params.note_length_max), 1, MAX_NOTE_LENGTH))

	if velocity_min > velocity_max:
		logger.warning(f"velocity_min {velocity_min} > velocity_max {velocity_max} - swapping")
		velocity_min, velocity_max = velocity_max, velocity_min

	if length_min > length_max:
		logger.warning(f"note_length_min {length_min} > note_length_max {length_max} - swapping")
		length_min, length_max = length_max, length_min

	return dataclasses.replace(
		params,
		bars = int(_clamp(int(params.bars), 1, MAX_BARS)),
		tempo = int(_clamp(int(params.tempo), MIN_TEMPO, MAX_TEMPO)),
		root_note = int(_clamp(int(params.root_note), 0, 127)),
		scale = midimorph.intervals.scale_key(params.scale),
		density = float(_clamp(float(params.density), 0.0, 1.0)),
		velocity_min = velocity_min,
		velocity_max = velocity_max,
		pitch_range = int(_clamp(int(params.pitch_range), 0, 127)),
		note_length_min = length_min,
		note_length_max = length_max,
		humanize = float(_clamp(float(params.humanize), 0.0, 1.0)),
		chaos = float(_clamp(float(params.chaos), 0.0, 1.0)),
		seed = None if params.seed is None else int(params.seed)
	)


def params_from_config (
	data: typing.Dict[str, typing.Any],
	base: midimorph.generator.GeneratorParams = DEFAULT_PARAMS
) -> midimorph.generator.GeneratorParams:

	"""
	Build sanitised generator parameters from a config mapping.

	Values are read from the ``generator`` section when present, otherwise
	from the top level. Missing keys keep the value from ``base``; unknown keys
	are logged and ignored.
	"""

	section = data.get('generator', data)

	if not isinstance(section, dict):
		raise ValueError("The 'generator' config section must be a mapping")

	known = {field.name for field in dataclasses.fields(midimorph.generator.GeneratorParams)}
	overrides: typing.Dict[str, typing.Any] = {}

	for key, value in section.items():

		if key not in known:
			if key not in ('generator', 'output', 'preview'):
				logger.warning(f"Ignoring unknown config key '{key}'")
			continue

		if value is None and key != 'seed':
			continue

		try:
			if key in _INT_FIELDS:
				value = int(value)
			elif key in _FLOAT_FIELDS:
				value = float(value)
		except (TypeError, ValueError) as e:
			raise ValueError(f"Invalid value for '{key}': {value!r}") from e

		overrides[key] = value

	return sanitize(dataclasses.replace(base, **overrides))
