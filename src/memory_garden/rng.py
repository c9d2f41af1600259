"""Seeded random streams shared by every structure generator."""

from __future__ import annotations

from typing import Callable, Iterable

Draw = Callable[[], float]

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193
MULBERRY_INCREMENT = 0x6D2B79F5
UINT32_MASK = 0xFFFFFFFF
UINT32_RANGE = 4294967296.0


def _imul(a: int, b: int) -> int:
    return (a * b) & UINT32_MASK


def _code_units(text: str) -> Iterable[int]:
    # UTF-16 code units, so keys hash the same as in the browser client.
    for char in text:
        code = ord(char)
        if code > 0xFFFF:
            code -= 0x10000
            yield 0xD800 + (code >> 10)
            yield 0xDC00 + (code & 0x3FF)
        else:
            yield code


def create_seed_hash(key: str) -> int:
    """FNV-1a hash of ``key`` as an unsigned 32-bit integer."""

    value = FNV_OFFSET_BASIS
    for code in _code_units(key):
        value ^= code
        value = _imul(value, FNV_PRIME)
    return value


def make_generator(seed: int) -> Draw:
    """Return a mulberry32 stream of floats in [0, 1) for ``seed``."""

    state = seed & UINT32_MASK

    def draw() -> float:
        nonlocal state
        state = (state + MULBERRY_INCREMENT) & UINT32_MASK
        t = state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & UINT32_MASK
        return ((t ^ (t >> 14)) & UINT32_MASK) / UINT32_RANGE

    return draw


def scale_into(draw: float, minimum: float, maximum: float) -> float:
    """Map a draw onto ``[minimum, maximum]``; degenerate ranges return ``minimum``."""

    if minimum == maximum:
        return minimum
    clamped = min(max(draw, 0.0), 1.0)
    return minimum + (maximum - minimum) * clamped


def centered(draw: Draw, spread: float) -> float:
    return (draw() - 0.5) * spread
