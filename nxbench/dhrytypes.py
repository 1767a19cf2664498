"""Types, constants and global state shared by the Dhrystone benchmark."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

VERSION = "C, Version 2.2"
CLOCK_TYPE = "rdcycle()"
HZ = 1_000_000
TOO_SMALL_TIME = 1
MIC_SECS_PER_SECOND = 1_000_000
NUMBER_OF_RUNS = 500
STR_30_LENGTH = 30
ARRAY_SIZE = 50


class Enumeration(enum.IntEnum):
    """The five-valued enumeration used throughout the benchmark."""

    IDENT_1 = 0
    IDENT_2 = 1
    IDENT_3 = 2
    IDENT_4 = 3
    IDENT_5 = 4


def _check_str30(text: str) -> str:
    if len(text) > STR_30_LENGTH:
        raise ValueError(f"string of {len(text)} characters exceeds {STR_30_LENGTH}")
    return text


@dataclass(eq=False)
class Record:
    """A benchmark record; only the first variant of the union is used."""

    ptr_comp: Optional["Record"] = field(default=None, repr=False)
    discr: Enumeration = Enumeration.IDENT_1
    enum_comp: Enumeration = Enumeration.IDENT_1
    int_comp: int = 0
    str_comp: str = ""

    def __post_init__(self) -> None:
        _check_str30(self.str_comp)

    def copy_from(self, other: "Record") -> None:
        """Assign every field of ``other`` to this record."""
        self.ptr_comp = other.ptr_comp
        self.discr = other.discr
        self.enum_comp = other.enum_comp
        self.int_comp = other.int_comp
        self.str_comp = _check_str30(other.str_comp)


def _new_arr_2() -> list[list[int]]:
    return [[0] * ARRAY_SIZE for _ in range(ARRAY_SIZE)]


@dataclass
class DhrystoneState:
    """The global variables the benchmark procedures read and write."""

    ptr_glob: Record = field(default_factory=Record)
    next_ptr_glob: Record = field(default_factory=Record)
    int_glob: int = 0
    bool_glob: bool = False
    ch_1_glob: str = "\0"
    ch_2_glob: str = "\0"
    arr_1_glob: list[int] = field(default_factory=lambda: [0] * ARRAY_SIZE)
    arr_2_glob: list[list[int]] = field(default_factory=_new_arr_2)