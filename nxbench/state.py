"""Number-recognising state machine kernel."""

from __future__ import annotations

import enum
from typing import MutableSequence

from nxbench.crc import crcu32


class CoreState(enum.IntEnum):
    """States of the number-recognising machine."""

    START = 0
    INVALID = 1
    S1 = 2
    S2 = 3
    INT = 4
    FLOAT = 5
    EXPONENT = 6
    SCIENTIFIC = 7


NUM_CORE_STATES = len(CoreState)

_INT_PATTERNS = (b"5012", b"1234", b"-874", b"+122")
_FLOAT_PATTERNS = (b"35.54400", b".1234500", b"-110.700", b"+0.64400")
_SCI_PATTERNS = (b"5.500e+3", b"-.123e-2", b"-87e+832", b"+0.6e-12")
_ERR_PATTERNS = (b"T0.3e-1F", b"-T.T++Tq", b"1T3.4e4z", b"34.0e-T^")

_COMMA = ord(",")
_DOT = ord(".")
_SIGNS = frozenset(b"+-")
_EXP_MARKS = frozenset(b"eE")


def _to_s16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


def _is_digit(symbol: int) -> bool:
    return 0x30 <= symbol <= 0x39


def _pattern_for(seed: int) -> bytes:
    kind = seed & 0x7
    choice = (seed >> 3) & 0x3
    if kind <= 2:
        return _INT_PATTERNS[choice]
    if kind <= 4:
        return _FLOAT_PATTERNS[choice]
    if kind <= 6:
        return _SCI_PATTERNS[choice]
    return _ERR_PATTERNS[choice]


def init_state(size: int, seed: int) -> bytearray:
    """Build a zero-terminated, comma-separated input of number patterns."""
    if size < 0:
        raise ValueError("size must not be negative")
    block = bytearray(size)
    limit = size - 1
    total = 0
    pattern = b""
    while total + len(pattern) + 1 < limit:
        if pattern:
            block[total:total + len(pattern)] = pattern
            block[total + len(pattern)] = _COMMA
            total += len(pattern) + 1
        seed = _to_s16(seed + 1)
        pattern = _pattern_for(seed)
    return block


def state_transition(
    data: bytes | bytearray, pos: int, counts: MutableSequence[int]
) -> tuple[CoreState, int]:
    """Scan one token from ``pos``; return the final state and the next position.

    ``counts`` accumulates the transitions taken, indexed by state.
    """
    state = CoreState.START
    end = len(data)
    while pos < end and data[pos] != 0 and state is not CoreState.INVALID:
        symbol = data[pos]
        pos += 1
        if symbol == _COMMA:
            break
        if state is CoreState.START:
            if _is_digit(symbol):
                state = CoreState.INT
            elif symbol in _SIGNS:
                state = CoreState.S1
            elif symbol == _DOT:
                state = CoreState.FLOAT
            else:
                state = CoreState.INVALID
                counts[CoreState.INVALID] += 1
            counts[CoreState.START] += 1
        elif state is CoreState.S1:
            if _is_digit(symbol):
                state = CoreState.INT
            elif symbol == _DOT:
                state = CoreState.FLOAT
            else:
                state = CoreState.INVALID
            counts[CoreState.S1] += 1
        elif state is CoreState.INT:
            if symbol == _DOT:
                state = CoreState.FLOAT
                counts[CoreState.INT] += 1
            elif not _is_digit(symbol):
                state = CoreState.INVALID
                counts[CoreState.INT] += 1
        elif state is CoreState.FLOAT:
            if symbol in _EXP_MARKS:
                state = CoreState.S2
                counts[CoreState.FLOAT] += 1
            elif not _is_digit(symbol):
                state = CoreState.INVALID
                counts[CoreState.FLOAT] += 1
        elif state is CoreState.S2:
            state = CoreState.EXPONENT if symbol in _SIGNS else CoreState.INVALID
            counts[CoreState.S2] += 1
        elif state is CoreState.EXPONENT:
            state = CoreState.SCIENTIFIC if _is_digit(symbol) else CoreState.INVALID
            counts[CoreState.EXPONENT] += 1
        elif state is CoreState.SCIENTIFIC:
            if not _is_digit(symbol):
                state = CoreState.INVALID
                counts[CoreState.INVALID] += 1
    return state, pos


def _scan(
    data: bytearray, final_counts: list[int], track_counts: list[int]
) -> None:
    pos = 0
    while pos < len(data) and data[pos] != 0:
        state, pos = state_transition(data, pos, track_counts)
        final_counts[state] += 1


def _corrupt(data: bytearray, key: int, step: int) -> None:
    for pos in range(0, len(data), step):
        if data[pos] != _COMMA:
            data[pos] ^= key


def bench_state(
    memblock: bytearray, seed1: int, seed2: int, step: int, crc: int
) -> int:
    """Run the machine over the input, corrupt it, run again, then undo.

    The input is restored only when ``seed1`` equals ``seed2``.
    """
    if step <= 0:
        raise ValueError("step must be positive")
    final_counts = [0] * NUM_CORE_STATES
    track_counts = [0] * NUM_CORE_STATES
    _scan(memblock, final_counts, track_counts)
    _corrupt(memblock, seed1 & 0xFF, step)
    _scan(memblock, final_counts, track_counts)
    _corrupt(memblock, seed2 & 0xFF, step)
    for final, track in zip(final_counts, track_counts):
        crc = crcu32(final, crc)
        crc = crcu32(track, crc)
    return crc