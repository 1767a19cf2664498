# nxbench

Synthetic CPU benchmark code in plain Python: the Dhrystone 2.2 benchmark
and two CoreMark-style workload kernels (matrix arithmetic and a
number-recognising state machine), each folding its results into a 16-bit
CRC. Nothing outside the standard library is needed.

## Installation

```
pip install .
```

Run the tests with:

```
pip install ".[test]"
pytest
```

## Dhrystone

```
nxbench-dhrystone
```

The command runs the Dhrystone loop 500 times, multiplying the run count by
ten until the elapsed time can be measured, then prints the final values of
the benchmark variables next to their expected values, followed by
microseconds per run, Dhrystones per second and DMIPS per MHz. Command-line
arguments are accepted but ignored.

From Python:

```python
from nxbench.dhrystone import run_dhrystone

result = run_dhrystone(500)
print(result.number_of_runs, result.user_time)
print(result.render())
```

`DhrystoneResult` also exposes `microseconds`, `dhrystones_per_second` and
`dmips` (DMIPS per MHz in hundredths). The benchmark procedures live in
`nxbench.dhrystone` (`proc_1` to `proc_5`) and `nxbench.dhryprocs`
(`proc_6`, `proc_7`, `proc_8`, `func_1`, `func_2`, `func_3`); the shared
types `Enumeration`, `Record` and `DhrystoneState` are in
`nxbench.dhrytypes`.

## Workload kernels

### State machine (`nxbench.state`)

`init_state(size, seed)` builds a zero-padded, comma-separated byte buffer
of integer, float, scientific and malformed number patterns chosen by the
seed. `state_transition(data, pos, counts)` scans one token and returns the
final `CoreState` and the next position. `bench_state(memblock, seed1,
seed2, step, crc)` scans the buffer, corrupts every `step`-th byte with
`seed1`, scans again, undoes the corruption with `seed2` (so the buffer is
restored only when the two seeds match) and returns the updated CRC.

```python
from nxbench.state import bench_state, init_state

block = init_state(666, 0x3415)
crc = bench_state(block, 0x3415, 0x3415, 0x22, 0)
```

### Matrix (`nxbench.matrix`)

`init_matrix(blksize, seed)` picks the largest dimension that fits the
block size and fills matrices A and B, returning a `MatrixParams`.
`bench_matrix(params, seed, crc)` runs `matrix_test`: add a constant,
multiply by a constant, by a vector, by a matrix and a bit-extracting matrix
product, scoring each result with `matrix_sum` and folding the scores into
the CRC. Matrix A is returned to its starting contents afterwards. The
individual steps (`matrix_add_const`, `matrix_mul_const`,
`matrix_mul_vect`, `matrix_mul_matrix`, `matrix_mul_matrix_bitextract`) are
public as well and use 16-bit data with 32-bit results.

```python
from nxbench.matrix import bench_matrix, init_matrix

params = init_matrix(666, 0x3415 | (0x3415 << 16))
crc = bench_matrix(params, 0x66, 0)
```

### CRC and seed parsing (`nxbench.crc`)

`crcu8`, `crcu16`, `crc16` and `crcu32` fold 8-, 16- and 32-bit values into
a 16-bit CRC. `parseval` reads a seed string: an optional `-`, an optional
`0x` prefix, digits, then an optional `K` (times 1024) or `M` (times
1024 * 1024) suffix, so `0x66`, `2K` and `-5` are all accepted.

### Timing (`nxbench.timing`)

`Timer` records ticks between `start()` and `stop()` (also usable as a
context manager) and reports them with `ticks()`; `time_in_secs` converts
ticks to seconds. `RunKind` names the validation, performance and profile
seed sets; `seeds_for(kind)` gives the three seeds of each, and
`run_kind_for_size(total_size)` picks the kind implied by a data size
(1200 for profile, 2000 for performance, anything else for validation).

## What the package does not do

There is no linked-list workload and no combined CoreMark driver: no
command runs the kernels together, checks their CRCs against reference
values or prints a CoreMark score. The kernels above are provided as
library functions to be called directly.