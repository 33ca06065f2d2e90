# hcsbench

An interactive console tool that times how long it takes to sum an array
sequentially and with several threads, reduces the timings to statistics,
and keeps plain-text records about the computing systems the measurements
were taken on.

## Installation

```
pip install .
```

## Running

```
hcsbench [--config FILE]
```

`--config` names the configuration file (default `config.txt` in the current
directory). The same entry point is `hcsbench.app.main`, which returns the
exit status: `0` normally, `-1` when the configuration file is missing or
malformed (the reason is printed to standard error).

On start the application creates, if missing, the directories
`CalcTestResults`, `ComputingSystemRepository` and
`AlgTestingResultRepository` in the current directory, then reads the
configuration. A configuration file starts with the word `AppConfig`,
followed by whitespace-separated `parameter value` pairs:

```
AppConfig
compSystemId 1
dir_calcTestResults CalcTestResults
dir_computingSystemRepository ComputingSystemRepository
```

Any other parameter name, or a `compSystemId` that is not an integer, is an
error. The directories named in the file are created if they do not exist.

### Main menu

At the `>` prompt, enter one of these keys:

| Keys | Command |
| --- | --- |
| `1` `?` `h` `help` | Print the command list |
| `2` `q` `exit` | Leave the program |
| `3` `libs` | Print supported back ends |
| `4` `gpu` | Print GPU device 0 properties |
| `5` | Write GPU specifications to `gpu-specs.txt` (only when a GPU device is present) |
| `6` `test-arr-help` | Check the parallel-for sum on a small array |
| `7` `test-vec-gpu` | Check GPU summation |
| `8` `test-sum` | Run the summation benchmark |
| `9` `app-conf` | Application configuration sub-menu |
| `10` `cs-repo-conf` | Computing system repository sub-menu |
| `11` `algtr-repo-conf` | Algorithm test result repository sub-menu |
| `12` `fs-hlp` | Interactive file system helpers |

Sub-menus take numbered commands; `1` returns to the main menu. The program
also ends when standard input runs out.

`test-sum` sums a vector of 1,000,000 elements of value 0.001 20 times each
sequentially, with 4 threads (`sum_threaded`) and as a parallel-for
reduction over 4 workers (`sum_openmp`), prints every timed run, the
statistics of each method, and the speed-up and efficiency of each parallel
method against the sequential one.

## Using it as a library

```python
from hcsbench.arrays import VectorRam
from hcsbench.benchmark import TestParams, launch_sum, launch_sum_threaded
from hcsbench.statistics import CalculationStatistics, ParallelCalcIndicators

vector = VectorRam(1_000_000)
vector.init_by_val(0.001)
params = TestParams(iter_num=10)

seq = CalculationStatistics.from_results(launch_sum(vector, params))
par = CalculationStatistics.from_results(launch_sum_threaded(vector, 4, params))
print(ParallelCalcIndicators.from_statistics(seq, par, 4).format())
```

Modules:

- `hcsbench.arrays` — `VectorRam` and the summation functions `sum_range`,
  `sum_all`, `sum_threaded`, `sum_all_threaded`, `sum_openmp`. Ranges are
  inclusive of both ends.
- `hcsbench.benchmark` — `TestParams` (`iter_num`, 20 by default), the timed
  runs `timed_sum*` returning `FuncResult` with the time in microseconds,
  the repeated runs `launch_sum*`, and the self checks `test_array_helper`,
  `test_vector_gpu`, `test_sum`.
- `hcsbench.statistics` — `FuncResult`; `CalculationStatistics.from_results`
  (minimum, median, mean, 95th percentile, maximum, standard deviation; raises
  `ValueError` on an empty list, a failed run, or results that differ from the
  first by a relative 0.0001 or more); `ParallelCalcIndicators.from_statistics`.
- `hcsbench.computing_system` — `ComputingSystem` (stored as
  `<dir>/<id>/ComputingSystem.txt`) and `ComputingSystemRepository`, which
  lists identifiers in `<dir>/List.txt`.
- `hcsbench.alg_testing` — `TaskGroup`, `Task`, `AlgTestingResult` and
  `AlgTestingResultRepository`, which appends one line per result to
  `<dir>/1.txt`.
- `hcsbench.config` — `AppConfig.from_file`, raising `ConfigError`.
- `hcsbench.filesystem`, `hcsbench.console` — small file and prompt helpers.
- `hcsbench.cuda` — GPU device queries, `LibSupport`, `VectorGpu`, `sum_cuda`.
- `hcsbench.menu`, `hcsbench.app` — the menus and the `Application`.

## What it does not do

- There is no GPU back end. `is_cuda_supported()` is `False`,
  `cuda_device_count()` is `0`, device properties come back uninitialised,
  and creating a `VectorGpu` or calling `sum_cuda` raises
  `CudaNotSupportedError`. In `test-sum` the GPU runs are skipped and their
  indicators come out as NaN or infinity.
- The computing system sub-menu cannot change or remove a system; those
  entries only print `Change()` and `Remove()`.
- The test result sub-menu can only append a sample record (command `5`);
  it cannot list, show, change or remove records.
- `compSystemId` and `dir_calcTestResults` are read and shown, but nothing
  else uses them.

## Tests

```
pip install .[test]
pytest
```