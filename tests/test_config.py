import logging
import pathlib

import pytest

import midimorph.config
import midimorph.generator


def test_load_config_missing_file (tmp_path: pathlib.Path, caplog: pytest.LogCaptureFixture) -> None:

	"""A missing config file returns an empty mapping with a warning."""

	with caplog.at_level(logging.WARNING):
		data = midimorph.config.load_config(str(tmp_path / "absent.yaml"))

	assert data == {}
	assert "not found" in caplog.text


def test_load_config_reads_yaml (tmp_path: pathlib.Path) -> None:

	"""YAML sections are returned as nested dicts."""

	path = tmp_path / "midimorph.yaml"
	path.write_text("generator:\n  bars: 8\n  scale: Dorian\noutput:\n  filename: out.mid\n")

	data = midimorph.config.load_config(str(path))

	assert data == {"generator": {"bars": 8, "scale": "Dorian"}, "output": {"filename": "out.mid"}}


def test_load_config_empty_file (tmp_path: pathlib.Path) -> None:

	"""An empty YAML document is treated as no config."""

	path = tmp_path / "empty.yaml"
	path.write_text("")

	assert midimorph.config.load_config(str(path)) == {}


def test_load_config_rejects_non_mapping (tmp_path: pathlib.Path) -> None:

	"""A YAML list at the top level is an error."""

	path = tmp_path / "list.yaml"
	path.write_text("- 1\n- 2\n")

	with pytest.raises(ValueError, match="mapping"):
		midimorph.config.load_config(str(path))


def test_params_from_generator_section () -> None:

	"""Values in the generator section override the defaults."""

	params = midimorph.config.params_from_config({"generator": {"bars": 8, "scale": "Dorian", "seed": "77"}})

	assert params.bars == 8
	assert params.scale == "dorian"
	assert params.seed == 77
	assert params.tempo == midimorph.config.DEFAULT_PARAMS.tempo


def test_params_from_flat_mapping () -> None:

	"""A mapping without a generator section is read directly."""

	params = midimorph.config.params_from_config({"tempo": 90, "density": 0.25})

	assert params.tempo == 90
	assert params.density == 0.25


def test_unknown_keys_ignored (caplog: pytest.LogCaptureFixture) -> None:

	"""Unknown keys are logged and skipped."""

	with caplog.at_level(logging.WARNING):
		params = midimorph.config.params_from_config({"wobble": 3})

	assert params == midimorph.config.DEFAULT_PARAMS
	assert "wobble" in caplog.text


def test_invalid_number_raises () -> None:

	"""Non-numeric values for numeric fields raise ValueError."""

	with pytest.raises(ValueError, match="bars"):
		midimorph.config.params_from_config({"bars": "lots"})


def test_sanitize_clamps_ranges () -> None:

	"""Out-of-range values are clamped to their valid ranges."""

	raw = midimorph.generator.GeneratorParams(
		bars = 0,
		tempo = 1000,
		root_note = 200,
		density = 1.5,
		velocity_min = -10,
		velocity_max = 300,
		pitch_range = -3,
		note_length_min = 0,
		note_length_max = 0,
		humanize = -1.0,
		chaos = 2.0,
	)

	params = midimorph.config.sanitize(raw)

	assert params.bars == 1
	assert params.tempo == midimorph.config.MAX_TEMPO
	assert params.root_note == 127
	assert params.density == 1.0
	assert (params.velocity_min, params.velocity_max) == (0, 127)
	assert params.pitch_range == 0
	assert (params.note_length_min, params.note_length_max) == (1, 1)
	assert params.humanize == 0.0
	assert params.chaos == 1.0


def test_sanitize_swaps_reversed_pairs () -> None:

	"""min > max pairs are reordered."""

	raw = midimorph.generator.GeneratorParams(velocity_min=110, velocity_max=40, note_length_min=6, note_length_max=2)

	params = midimorph.config.sanitize(raw)

	assert (params.velocity_min, params.velocity_max) == (40, 110)
	assert (params.note_length_min, params.note_length_max) == (2, 6)


def test_sanitize_rejects_unknown_scale () -> None:

	"""Unknown scale names cannot be sanitised."""

	with pytest.raises(ValueError, match="Unknown scale"):
		midimorph.config.sanitize(midimorph.generator.GeneratorParams(scale="klingon"))
