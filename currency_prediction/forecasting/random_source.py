"""
Seed hashing and pseudo-random generation for synthesized rate histories.

Both algorithms are fixed so a currency code always produces the same series,
on any platform and in any process:

- ``string_hash`` is the 32-bit polynomial hash ``h = 31 * h + unit`` over the
  UTF-16 code units of the string, wrapped to a signed 32-bit integer.
- ``SeededRandom`` is a 48-bit linear congruential generator with multiplier
  ``0x5DEECE66D`` and addend ``0xB``. ``random()`` combines a 26-bit and a
  27-bit draw into a 53-bit double in [0, 1).
"""
from typing import Callable, Protocol

MULTIPLIER = 0x5DEECE66D
ADDEND = 0xB
MASK = (1 << 48) - 1
DOUBLE_UNIT = 1.0 / (1 << 53)


class UniformSource(Protocol):
    def random(self) -> float:
        ...


def string_hash(text: str) -> int:
    encoded = text.encode("utf-16-be")
    h = 0
    for i in range(0, len(encoded), 2):
        unit = (encoded[i] << 8) | encoded[i + 1]
        h = (31 * h + unit) & 0xFFFFFFFF
    if h >= 1 << 31:
        h -= 1 << 32
    return h


class SeededRandom:
    def __init__(self, seed: int):
        self._seed = (seed ^ MULTIPLIER) & MASK

    def _next(self, bits: int) -> int:
        self._seed = (self._seed * MULTIPLIER + ADDEND) & MASK
        return self._seed >> (48 - bits)

    def random(self) -> float:
        return ((self._next(26) << 27) + self._next(27)) * DOUBLE_UNIT


def for_currency(currency_code: str) -> SeededRandom:
    return SeededRandom(string_hash(currency_code))


RandomFactory = Callable[[str], UniformSource]
