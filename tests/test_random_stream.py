import pytest

import midimorph.random_stream


def test_known_park_miller_states () -> None:

	"""Seed 1 walks the textbook Park-Miller sequence."""

	rng = midimorph.random_stream.SeededRandom(1)

	states = []
	for _ in range(3):
		rng.random()
		states.append(rng.state)

	assert states == [16807, 282475249, 1622650073]


def test_value_is_derived_from_state () -> None:

	"""Each value is (state - 1) / (2^31 - 2)."""

	rng = midimorph.random_stream.SeededRandom(1)

	assert rng.random() == 16806 / 2147483645


def test_same_seed_same_stream () -> None:

	"""Two streams from the same seed produce identical values."""

	a = midimorph.random_stream.SeededRandom(42)
	b = midimorph.random_stream.SeededRandom(42)

	assert [a.random() for _ in range(100)] == [b.random() for _ in range(100)]


def test_instances_do_not_share_state () -> None:

	"""Drawing from one stream leaves another untouched."""

	a = midimorph.random_stream.SeededRandom(7)
	b = midimorph.random_stream.SeededRandom(7)

	for _ in range(10):
		a.random()

	assert b.state == 7


def test_values_in_unit_interval () -> None:

	"""Values stay within [0, 1]."""

	rng = midimorph.random_stream.SeededRandom(123456)

	for _ in range(1000):
		value = rng.random()
		assert 0.0 <= value <= 1.0


@pytest.mark.parametrize("seed, expected", [
	(0, 2147483646),
	(-5, 2147483641),
	(2147483647, 2147483646),
	(2147483650, 3),
	(99, 99),
])
def test_seed_normalisation (seed: int, expected: int) -> None:

	"""Non-positive remainders are shifted into the valid state range."""

	assert midimorph.random_stream.SeededRandom(seed).state == expected


def test_random_int_bounds () -> None:

	"""random_int stays inside the inclusive range and covers it."""

	rng = midimorph.random_stream.SeededRandom(2024)
	seen = {rng.random_int(1, 4) for _ in range(500)}

	assert seen == {1, 2, 3, 4}


def test_random_int_single_value () -> None:

	"""A one-value range always returns that value but still advances."""

	rng = midimorph.random_stream.SeededRandom(5)

	assert rng.random_int(100, 100) == 100
	assert rng.state == 5 * 16807


def test_choice_from_empty_pool_raises () -> None:

	"""choice() rejects an empty pool."""

	rng = midimorph.random_stream.SeededRandom(5)

	with pytest.raises(ValueError):
		rng.choice([])
