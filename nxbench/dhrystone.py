"""Dhrystone driver: the main measurement loop and the record procedures."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from typing import Optional, Sequence

from nxbench.dhryprocs import func_1, func_2, proc_6, proc_7, proc_8
from nxbench.dhrytypes import (
    CLOCK_TYPE,
    HZ,
    MIC_SECS_PER_SECOND,
    NUMBER_OF_RUNS,
    TOO_SMALL_TIME,
    VERSION,
    DhrystoneState,
    Enumeration,
    Record,
)

_SOME_STRING = "DHRYSTONE PROGRAM, SOME STRING"
_FIRST_STRING = "DHRYSTONE PROGRAM, 1'ST STRING"
_SECOND_STRING = "DHRYSTONE PROGRAM, 2'ND STRING"
_THIRD_STRING = "DHRYSTONE PROGRAM, 3'RD STRING"
_DMIPS_REFERENCE = 1_000_000 // 1757


def _cycles() -> int:
    """Current time in ticks of ``HZ`` per second."""
    return time.perf_counter_ns() * HZ // 1_000_000_000


def _c_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def proc_3(state: DhrystoneState) -> Optional[Record]:
    """Return the record ``ptr_glob`` points to and refresh its ``int_comp``."""
    state.ptr_glob.int_comp = proc_7(10, state.int_glob)
    return state.ptr_glob.ptr_comp


def proc_1(state: DhrystoneState, ptr: Record) -> None:
    """Copy the global record into the one ``ptr`` points to, then update both."""
    next_record = ptr.ptr_comp
    if next_record is None:
        raise ValueError("record does not point to another record")
    next_record.copy_from(state.ptr_glob)
    ptr.int_comp = 5
    next_record.int_comp = ptr.int_comp
    next_record.ptr_comp = ptr.ptr_comp
    next_record.ptr_comp = proc_3(state)
    if next_record.discr == Enumeration.IDENT_1:
        next_record.int_comp = 6
        next_record.enum_comp = proc_6(state, ptr.enum_comp)
        next_record.ptr_comp = state.ptr_glob.ptr_comp
        next_record.int_comp = proc_7(next_record.int_comp, 10)
    else:
        source = ptr.ptr_comp
        if source is None:
            raise ValueError("record does not point to another record")
        ptr.copy_from(source)


def proc_2(state: DhrystoneState, int_val: int) -> int:
    """Return ``int_val + 9 - int_glob``; needs ``ch_1_glob`` to be 'A'."""
    if state.ch_1_glob != "A":
        raise RuntimeError("ch_1_glob is not 'A'; the loop would never finish")
    int_loc = int_val + 10
    int_loc -= 1
    return int_loc - state.int_glob


def proc_4(state: DhrystoneState) -> None:
    """Fold ``ch_1_glob == 'A'`` into ``bool_glob`` and set ``ch_2_glob`` to 'B'."""
    bool_loc = state.ch_1_glob == "A"
    state.bool_glob = bool_loc | state.bool_glob
    state.ch_2_glob = "B"


def proc_5(state: DhrystoneState) -> None:
    """Set ``ch_1_glob`` to 'A' and clear ``bool_glob``."""
    state.ch_1_glob = "A"
    state.bool_glob = False


@dataclass
class DhrystoneResult:
    """Final variables and timing of a Dhrystone run."""

    state: DhrystoneState
    int_1_loc: int
    int_2_loc: int
    int_3_loc: int
    enum_loc: Enumeration
    str_1_loc: str
    str_2_loc: str
    attempts: tuple[int, ...]
    user_time: int

    @property
    def number_of_runs(self) -> int:
        """Run count of the attempt that was long enough to measure."""
        return self.attempts[-1]

    @property
    def microseconds(self) -> int:
        """Microseconds for one pass through the loop."""
        return ((self.user_time // self.number_of_runs) * MIC_SECS_PER_SECOND) // HZ

    @property
    def dhrystones_per_second(self) -> int:
        """Loop passes per second."""
        return (HZ * self.number_of_runs) // self.user_time

    @property
    def dmips(self) -> int:
        """DMIPS per MHz, in hundredths."""
        return 100 * _DMIPS_REFERENCE * self.number_of_runs // self.user_time

    def render(self) -> str:
        """The benchmark report text."""
        state = self.state
        ptr_glob = state.ptr_glob
        next_ptr = state.next_ptr_glob

        def address(record: Optional[Record]) -> int:
            return id(record) if record is not None else 0

        lines = [
            "",
            f"Dhrystone Benchmark, Version {VERSION}",
            "Program compiled without 'register' attribute",
            f"Using {CLOCK_TYPE}, HZ={HZ}",
            "",
        ]
        for position, runs in enumerate(self.attempts):
            lines.append(f"Trying {runs} runs through Dhrystone:")
            if position < len(self.attempts) - 1:
                lines.append("Measured time too small to obtain meaningful results")
                lines.append("")
        lines += [
            "Final values of the variables used in the benchmark:",
            "",
            f"Int_Glob:            {state.int_glob}",
            "        should be:   5",
            f"Bool_Glob:           {int(state.bool_glob)}",
            "        should be:   1",
            f"Ch_1_Glob:           {state.ch_1_glob}",
            "        should be:   A",
            f"Ch_2_Glob:           {state.ch_2_glob}",
            "        should be:   B",
            f"Arr_1_Glob[8]:       {state.arr_1_glob[8]}",
            "        should be:   7",
            f"Arr_2_Glob[8][7]:    {state.arr_2_glob[8][7]}",
            "        should be:   Number_Of_Runs + 10",
            "Ptr_Glob->",
            f"  Ptr_Comp:          {address(ptr_glob.ptr_comp)}",
            "        should be:   (implementation-dependent)",
            f"  Discr:             {int(ptr_glob.discr)}",
            "        should be:   0",
            f"  Enum_Comp:         {int(ptr_glob.enum_comp)}",
            "        should be:   2",
            f"  Int_Comp:          {ptr_glob.int_comp}",
            "        should be:   17",
            f"  Str_Comp:          {ptr_glob.str_comp}",
            f"        should be:   {_SOME_STRING}",
            "Next_Ptr_Glob->",
            f"  Ptr_Comp:          {address(next_ptr.ptr_comp)}",
            "        should be:   (implementation-dependent), same as above",
            f"  Discr:             {int(next_ptr.discr)}",
            "        should be:   0",
            f"  Enum_Comp:         {int(next_ptr.enum_comp)}",
            "        should be:   1",
            f"  Int_Comp:          {next_ptr.int_comp}",
            "        should be:   18",
            f"  Str_Comp:          {next_ptr.str_comp}",
            f"        should be:   {_SOME_STRING}",
            f"Int_1_Loc:           {self.int_1_loc}",
            "        should be:   5",
            f"Int_2_Loc:           {self.int_2_loc}",
            "        should be:   13",
            f"Int_3_Loc:           {self.int_3_loc}",
            "        should be:   7",
            f"Enum_Loc:            {int(self.enum_loc)}",
            "        should be:   1",
            f"Str_1_Loc:           {self.str_1_loc}",
            f"        should be:   {_FIRST_STRING}",
            f"Str_2_Loc:           {self.str_2_loc}",
            f"        should be:   {_SECOND_STRING}",
            "",
            f"Microseconds for one run through Dhrystone: {self.microseconds}",
            f"Dhrystones per Second:                      {self.dhrystones_per_second}",
            f"User_Time : {self.user_time}",
            f"Number_Of_Runs : {self.number_of_runs}",
            f"HZ : {HZ}",
        ]
        natural, real = divmod(self.dmips, 100)
        lines.append(
            f"DMIPS per Mhz:                              {natural}."
            f"{'0' if real < 10 else ''}{real}"
        )
        return "\n".join(lines) + "\n"


def _initial_state() -> DhrystoneState:
    state = DhrystoneState()
    state.ptr_glob.ptr_comp = state.next_ptr_glob
    state.ptr_glob.discr = Enumeration.IDENT_1
    state.ptr_glob.enum_comp = Enumeration.IDENT_3
    state.ptr_glob.int_comp = 40
    state.ptr_glob.str_comp = _SOME_STRING
    state.arr_2_glob[8][7] = 10
    return state


def run_dhrystone(number_of_runs: int) -> DhrystoneResult:
    """Run the benchmark, multiplying the run count by ten until it can be timed."""
    if number_of_runs <= 0:
        raise ValueError("number of runs must be positive")
    state = _initial_state()
    str_1_loc = _FIRST_STRING
    attempts: list[int] = []
    runs = number_of_runs
    int_1_loc = int_2_loc = int_3_loc = 0
    enum_loc = Enumeration.IDENT_2
    str_2_loc = ""

    while True:
        attempts.append(runs)
        begin = _cycles()
        for run_index in range(1, runs + 1):
            proc_5(state)
            proc_4(state)
            int_1_loc = 2
            int_2_loc = 3
            str_2_loc = _SECOND_STRING
            enum_loc = Enumeration.IDENT_2
            state.bool_glob = not func_2(state, str_1_loc, str_2_loc)
            while int_1_loc < int_2_loc:
                int_3_loc = proc_7(int_1_loc, int_2_loc)
                int_1_loc += 1
            proc_8(state, state.arr_1_glob, state.arr_2_glob, int_1_loc, int_3_loc)
            proc_1(state, state.ptr_glob)
            for code in range(ord("A"), ord(state.ch_2_glob) + 1):
                if enum_loc == func_1(state, chr(code), "C"):
                    enum_loc = proc_6(state, Enumeration.IDENT_1)
                    str_2_loc = _THIRD_STRING
                    int_2_loc = run_index
                    state.int_glob = run_index
            int_2_loc = int_2_loc * int_1_loc
            int_1_loc = _c_div(int_2_loc, int_3_loc)
            int_2_loc = 7 * (int_2_loc - int_3_loc) - int_1_loc
            int_1_loc = proc_2(state, int_1_loc)
        user_time = _cycles() - begin
        if user_time < TOO_SMALL_TIME:
            runs *= 10
        else:
            break

    return DhrystoneResult(
        state=state,
        int_1_loc=int_1_loc,
        int_2_loc=int_2_loc,
        int_3_loc=int_3_loc,
        enum_loc=enum_loc,
        str_1_loc=str_1_loc,
        str_2_loc=str_2_loc,
        attempts=tuple(attempts),
        user_time=user_time,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the benchmark with the default run count and print the report.

    Arguments are accepted but not used; the run count is fixed.
    """
    result = run_dhrystone(NUMBER_OF_RUNS)
    sys.stdout.write(result.render())
    return 0