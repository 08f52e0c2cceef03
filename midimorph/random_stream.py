import typing


MODULUS = 2147483647		# 2^31 - 1
MULTIPLIER = 16807


class SeededRandom:

	"""
	Park-Miller (Lehmer) pseudo-random stream.

	Multiplicative congruential generator with modulus 2^31 - 1 and multiplier
	16807. The same seed and call order give the same values on any platform,
	unlike ``random.Random``.

	Example:
		```python
		rng = SeededRandom(42)
		rng.random()           # → 0.000328707...
		rng.random_int(1, 4)   # → integer in [1, 4]
		```
	"""

	def __init__ (self, seed: int) -> None:

		"""
		Normalise the seed into a valid nonzero starting state.

		The remainder keeps the sign of the seed (as C and JavaScript do), so
		negative seeds land on the same state everywhere.
		"""

		seed = int(seed)
		state = abs(seed) % MODULUS

		if seed < 0:
			state = -state

		if state <= 0:
			state += MODULUS - 1

		self._state = state


	@property
	def state (self) -> int:

		"""Current internal state (1 to 2^31 - 2)."""

		return self._state


	def random (self) -> float:

		"""Advance the stream and return the next value in [0, 1)."""

		self._state = (self._state * MULTIPLIER) % MODULUS
		return (self._state - 1) / (MODULUS - 2)


	def random_int (self, low: int, high: int) -> int:

		"""
		Draw an integer in ``[low, high]`` using ``floor(r * (high - low + 1)) + low``.

		Consumes exactly one value from the stream.
		"""

		value = int(self.random() * (high - low + 1)) + low

		# r can reach exactly 1.0 for a single state; keep it inside the range.
		return min(value, high) if high >= low else value


	def choice (self, pool: typing.Sequence[typing.Any]) -> typing.Any:

		"""Pick one item from a non-empty sequence by index draw."""

		if not pool:
			raise ValueError("Pool cannot be empty")

		return pool[self.random_int(0, len(pool) - 1)]
