import pytest

from nxbench.state import CoreState, bench_state, init_state, state_transition


def _counts():
    return [0] * len(CoreState)


def test_init_state_pattern_sequence():
    block = init_state(100, 0)
    assert block.startswith(b"5012,5012,35.54400,35.54400,5.500e+3,")


def test_init_state_shape():
    block = init_state(666, 0x3415)
    assert len(block) == 666
    assert block[-1] == 0
    text = block.split(b"\x00")[0]
    assert text.endswith(b",")
    tokens = text[:-1].split(b",")
    assert all(len(token) in (4, 8) for token in tokens)


def test_init_state_rejects_negative_size():
    with pytest.raises(ValueError):
        init_state(-1, 0)


@pytest.mark.parametrize(
    "text, expected",
    [
        (b"5012,", CoreState.INT),
        (b"35.54400,", CoreState.FLOAT),
        (b"5.500e+3,", CoreState.SCIENTIFIC),
        (b"-.123e-2", CoreState.SCIENTIFIC),
        (b"+0.64400", CoreState.FLOAT),
    ],
)
def test_state_transition_recognises_numbers(text, expected):
    state, pos = state_transition(text, 0, _counts())
    assert state is expected
    assert pos == len(text)


def test_state_transition_stops_after_invalid_symbol():
    state, pos = state_transition(b"T0.3e-1F", 0, _counts())
    assert state is CoreState.INVALID
    assert pos == 1
    state, pos = state_transition(b"-T.T", 0, _counts())
    assert state is CoreState.INVALID
    assert pos == 2


def test_state_transition_counts_entry_only_for_int():
    counts = _counts()
    state_transition(b"5012", 0, counts)
    assert counts[CoreState.START] == 1
    assert sum(counts) == 1


def test_state_transition_at_terminator():
    state, pos = state_transition(b"\x00abc", 0, _counts())
    assert state is CoreState.START
    assert pos == 0


def test_state_transition_from_offset():
    state, pos = state_transition(b"5012,-874,", 5, _counts())
    assert state is CoreState.INT
    assert pos == 10


def test_bench_state_restores_input_when_seeds_match():
    block = init_state(666, 0x3415)
    original = bytes(block)
    crc = bench_state(block, 0x3415, 0x3415, 0x22, 0)
    assert bytes(block) == original
    assert 0 <= crc <= 0xFFFF


def test_bench_state_is_deterministic():
    first = init_state(400, 8)
    second = init_state(400, 8)
    assert bench_state(first, 8, 8, 0x22, 0x1234) == bench_state(second, 8, 8, 0x22, 0x1234)


def test_bench_state_leaves_corruption_when_seeds_differ():
    block = init_state(200, 0)
    original = bytes(block)
    bench_state(block, 0x11, 0, 0x22, 0)
    assert block[0] == original[0] ^ 0x11


def test_bench_state_rejects_bad_step():
    with pytest.raises(ValueError):
        bench_state(init_state(50, 0), 0, 0, 0, 0)