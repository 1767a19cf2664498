"""Dhrystone procedures that work on parameters and the shared state."""

from __future__ import annotations

from typing import MutableSequence, Sequence

from nxbench.dhrytypes import DhrystoneState, Enumeration


def func_3(enum_val: Enumeration) -> bool:
    """True only for ``IDENT_3``."""
    return enum_val == Enumeration.IDENT_3


def proc_6(state: DhrystoneState, enum_val: Enumeration) -> Enumeration:
    """Map an enumeration value to another, consulting ``state.int_glob``."""
    enum_val = Enumeration(enum_val)
    result = enum_val if func_3(enum_val) else Enumeration.IDENT_4
    if enum_val is Enumeration.IDENT_1:
        result = Enumeration.IDENT_1
    elif enum_val is Enumeration.IDENT_2:
        result = Enumeration.IDENT_1 if state.int_glob > 100 else Enumeration.IDENT_4
    elif enum_val is Enumeration.IDENT_3:
        result = Enumeration.IDENT_2
    elif enum_val is Enumeration.IDENT_5:
        result = Enumeration.IDENT_3
    return result


def proc_7(int_1: int, int_2: int) -> int:
    """Return ``int_2 + int_1 + 2``."""
    return int_2 + (int_1 + 2)


def proc_8(
    state: DhrystoneState,
    arr_1: MutableSequence[int],
    arr_2: Sequence[MutableSequence[int]],
    int_1: int,
    int_2: int,
) -> None:
    """Write a fixed pattern into both arrays around ``int_1 + 5``; set int_glob to 5."""
    int_loc = int_1 + 5
    if int_loc < 1 or int_loc + 30 >= len(arr_1) or int_loc + 20 >= len(arr_2):
        raise IndexError(f"index {int_loc} falls outside the arrays")
    row = arr_2[int_loc]
    if int_loc + 1 >= len(row) or int_loc >= len(arr_2[int_loc + 20]):
        raise IndexError(f"index {int_loc} falls outside the arrays")
    arr_1[int_loc] = int_2
    arr_1[int_loc + 1] = arr_1[int_loc]
    arr_1[int_loc + 30] = int_loc
    for index in (int_loc, int_loc + 1):
        row[index] = int_loc
    row[int_loc - 1] += 1
    arr_2[int_loc + 20][int_loc] = arr_1[int_loc]
    state.int_glob = 5


def func_1(state: DhrystoneState, ch_1: str, ch_2: str) -> Enumeration:
    """``IDENT_1`` when the characters differ; otherwise store ``ch_1`` and return ``IDENT_2``."""
    if ch_1 != ch_2:
        return Enumeration.IDENT_1
    state.ch_1_glob = ch_1
    return Enumeration.IDENT_2


def func_2(state: DhrystoneState, str_1: str, str_2: str) -> bool:
    """Compare two strings; True (and int_glob updated) when ``str_1 > str_2``."""
    if len(str_1) < 3 or len(str_2) < 4:
        raise ValueError("strings are too short to compare")
    int_loc = 2
    ch_loc = "\0"
    if func_1(state, str_1[int_loc], str_2[int_loc + 1]) != Enumeration.IDENT_1:
        raise RuntimeError("characters compared equal; the comparison loop cannot finish")
    ch_loc = "A"
    int_loc += 1
    if "W" <= ch_loc < "Z":
        int_loc = 7
    if ch_loc == "R":
        return True
    if str_1 > str_2:
        int_loc += 7
        state.int_glob = int_loc
        return True
    return False