"""Multi-stream Lehmer random number generator.

The generator supplies 256 independent streams. Each stream is a
Park-Miller minimal standard generator with modulus 2**31 - 1 and
multiplier 48271. Its values are uniform on the open interval (0, 1).
"""

from __future__ import annotations

import time

MODULUS = 2147483647
MULTIPLIER = 48271
CHECK = 399268537
STREAMS = 256
A256 = 22925
DEFAULT = 123456789

_PROMPT = "\nEnter a positive integer seed (9 digits or less) >> "
_RETRY = "\nInput out of range ... try again\n"


class RandomStreams:
    """A bank of 256 Lehmer generators with one stream selected at a time."""

    def __init__(self) -> None:
        self._seeds = [DEFAULT] + [0] * (STREAMS - 1)
        self._stream = 0
        self._initialized = False

    @property
    def stream(self) -> int:
        """Index of the currently selected stream."""
        return self._stream

    def random(self) -> float:
        """Advance the current stream and return a value in (0, 1)."""
        q, r = divmod(MODULUS, MULTIPLIER)
        seed = self._seeds[self._stream]
        t = MULTIPLIER * (seed % q) - r * (seed // q)
        self._seeds[self._stream] = t if t > 0 else t + MODULUS
        return self._seeds[self._stream] / MODULUS

    def plant_seeds(self, x: int) -> None:
        """Seed stream 0 with ``x`` and derive the states of all other streams."""
        q, r = divmod(MODULUS, A256)
        self._initialized = True
        current = self._stream
        self.select_stream(0)
        self.put_seed(x)
        self._stream = current
        for j in range(1, STREAMS):
            prev = self._seeds[j - 1]
            value = A256 * (prev % q) - r * (prev // q)
            self._seeds[j] = value if value > 0 else value + MODULUS

    def put_seed(self, x: int) -> None:
        """Set the state of the current stream.

        A positive ``x`` is reduced modulo the generator's modulus, a
        negative one is replaced by the system clock, and a zero state is
        asked for interactively until a value in range is entered.
        """
        if x > 0:
            x %= MODULUS
        if x < 0:
            x = int(time.time()) % MODULUS
        while x == 0:
            answer = input(_PROMPT)
            try:
                candidate = int(answer.strip())
            except ValueError:
                candidate = 0
            if 0 < candidate < MODULUS:
                x = candidate
            else:
                print(_RETRY, end="")
        self._seeds[self._stream] = x

    def get_seed(self) -> int:
        """Return the state of the current stream."""
        return self._seeds[self._stream]

    def select_stream(self, index: int) -> None:
        """Make ``index`` (taken modulo 256) the current stream."""
        self._stream = index % STREAMS
        if not self._initialized and self._stream != 0:
            self.plant_seeds(DEFAULT)


def self_test() -> bool:
    """Check the generator against its published reference states."""
    rng = RandomStreams()
    rng.select_stream(0)
    rng.put_seed(1)
    for _ in range(10000):
        rng.random()
    ok = rng.get_seed() == CHECK
    rng.select_stream(1)
    rng.plant_seeds(1)
    return ok and rng.get_seed() == A256