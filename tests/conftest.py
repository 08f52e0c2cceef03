import typing

import mido
import pytest

import midimorph.generator
import midimorph.intervals


class FakeMidiOut:

	"""MIDI output stub that keeps every message it is sent."""

	def __init__ (self) -> None:

		"""Start with an empty message log."""

		self.sent: typing.List[mido.Message] = []
		self.closed = False

	def send (self, message: mido.Message) -> None:

		"""Record an outgoing MIDI message."""

		self.sent.append(message)

	def close (self) -> None:

		"""Mark the fake device closed."""

		self.closed = True


def _fake_get_output_names () -> list[str]:

	"""Return a fixed list of MIDI output names for tests."""

	return ["Dummy MIDI"]


def _fake_open_output (name: str) -> FakeMidiOut:

	"""Return a fake MIDI output regardless of the name."""

	return FakeMidiOut()


@pytest.fixture
def patch_midi (monkeypatch: pytest.MonkeyPatch) -> None:

	"""Patch mido to use a fake MIDI output for tests that open ports."""

	monkeypatch.setattr(mido, "get_output_names", _fake_get_output_names)
	monkeypatch.setattr(mido, "open_output", _fake_open_output)


@pytest.fixture
def scale_registry (monkeypatch: pytest.MonkeyPatch) -> None:

	"""Give the test its own copy of the scale registry so registrations do not leak."""

	monkeypatch.setattr(midimorph.intervals, "SCALE_INTERVALS", dict(midimorph.intervals.SCALE_INTERVALS))
	monkeypatch.setattr(midimorph.intervals, "SCALE_NAMES", dict(midimorph.intervals.SCALE_NAMES))


@pytest.fixture
def fake_out () -> FakeMidiOut:

	"""A fresh fake output port."""

	return FakeMidiOut()


@pytest.fixture
def scenario_params () -> midimorph.generator.GeneratorParams:

	"""One bar of root notes on every step, no humanize."""

	return midimorph.generator.GeneratorParams(
		bars = 1,
		tempo = 120,
		root_note = 60,
		scale = "minor_pentatonic",
		density = 1.0,
		velocity_min = 100,
		velocity_max = 100,
		pitch_range = 0,
		note_length_min = 1,
		note_length_max = 1,
		humanize = 0.0,
		chaos = 0.0,
		seed = 42
	)
