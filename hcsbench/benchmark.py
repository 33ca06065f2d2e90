"""Timed summation runs, repeated experiments and the built-in self checks."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from typing import Callable

from hcsbench.arrays import VectorRam, sum_openmp, sum_range, sum_threaded
from hcsbench.cuda import VectorGpu, is_cuda_supported, sum_cuda
from hcsbench.statistics import CalculationStatistics, FuncResult, ParallelCalcIndicators


@dataclass
class TestParams:
    """Parameters of a numerical experiment."""

    __test__ = False

    iter_num: int = 20


def _resolve_range(vector, ind_start, ind_end) -> tuple[int, int]:
    start = 0 if ind_start is None else ind_start
    end = len(vector) - 1 if ind_end is None else ind_end
    return start, end


def _timed(compute: Callable[[], float]) -> FuncResult:
    begin = time.perf_counter_ns()
    result = compute()
    elapsed = (time.perf_counter_ns() - begin) // 1000
    return FuncResult(True, result, elapsed)


def timed_sum(vector: VectorRam, ind_start=None, ind_end=None) -> FuncResult:
    """Sum sequentially and time the run in microseconds."""
    start, end = _resolve_range(vector, ind_start, ind_end)
    return _timed(lambda: sum_range(vector.data, start, end))


def timed_sum_threaded(
    vector: VectorRam, threads_num: int, ind_start=None, ind_end=None
) -> FuncResult:
    """Sum with a thread per block and time the run in microseconds."""
    start, end = _resolve_range(vector, ind_start, ind_end)
    return _timed(lambda: sum_threaded(vector.data, start, end, threads_num))


def timed_sum_openmp(
    vector: VectorRam, threads_num: int, ind_start=None, ind_end=None
) -> FuncResult:
    """Sum as a parallel-for reduction and time the run in microseconds."""
    start, end = _resolve_range(vector, ind_start, ind_end)
    return _timed(lambda: sum_openmp(vector.data, start, end, threads_num))


def timed_sum_cuda(vector: VectorGpu, blocks_num: int, threads_num: int) -> FuncResult:
    """Sum a GPU vector and time the run in microseconds."""
    return _timed(
        lambda: sum_cuda(vector, 0, len(vector) - 1, blocks_num, threads_num)
    )


def _launch(label: str, run: Callable[[], FuncResult], iterations: int) -> list[FuncResult]:
    print(f"-------{label} Start ------")
    results = [run() for _ in range(iterations)]
    print(f"-------{label} End --------")
    return results


def launch_sum(vector: VectorRam, params: TestParams | None = None) -> list[FuncResult]:
    """Repeat the sequential sum ``params.iter_num`` times."""
    params = params or TestParams()
    return _launch(
        "LaunchSum(VectorRam<T>& v)", lambda: timed_sum(vector), params.iter_num
    )


def launch_sum_threaded(
    vector: VectorRam, threads_num: int, params: TestParams | None = None
) -> list[FuncResult]:
    """Repeat the threaded sum ``params.iter_num`` times."""
    params = params or TestParams()
    return _launch(
        "LaunchSum(VectorRam<T>& v, unsigned Nthreads)",
        lambda: timed_sum_threaded(vector, threads_num),
        params.iter_num,
    )


def launch_sum_openmp(
    vector: VectorRam, threads_num: int, params: TestParams | None = None
) -> list[FuncResult]:
    """Repeat the parallel-for sum ``params.iter_num`` times."""
    params = params or TestParams()
    return _launch(
        "LaunchSumOpenMP(VectorRam<T>& v, unsigned Nthreads)",
        lambda: timed_sum_openmp(vector, threads_num),
        params.iter_num,
    )


def launch_sum_cuda(
    vector: VectorGpu | None,
    blocks_num: int,
    threads_num: int,
    params: TestParams | None = None,
) -> list[FuncResult]:
    """Repeat the GPU sum; no runs take place without a GPU backend."""
    params = params or TestParams()
    iterations = params.iter_num if is_cuda_supported() else 0
    return _launch(
        "LaunchSumCuda(VectorGpu<T>& v, unsigned NumBlocks, unsigned Nthreads, TestParams p)",
        lambda: timed_sum_cuda(vector, blocks_num, threads_num),
        iterations,
    )


def test_array_helper() -> bool:
    """Check the parallel-for sum on a small array."""
    try:
        data = [0.1] * 10
        total = sum_openmp(data, 0, len(data) - 1, 4)
        print(f"ArrayRamHelper::SumOpenMP(v.data, 0, v.size): {total:g}")
    except Exception as exc:  # noqa: BLE001 - reported and turned into a verdict
        print(exc, file=sys.stderr)
        return False
    return True


test_array_helper.__test__ = False


def test_vector_gpu() -> bool:
    """Check GPU summation over a range of block and thread counts."""
    try:
        vector = VectorGpu(350000)
        vector.init_by_val(0.001)
        for blocks in range(1, 6):
            for threads in range(1, 6):
                total = sum_cuda(vector, 0, len(vector) - 1, blocks, threads)
                print(f"{blocks}, {threads}: {total:g}")
    except Exception as exc:  # noqa: BLE001
        print(exc, file=sys.stderr)
        return False
    return True


test_vector_gpu.__test__ = False


def _print_results(title: str, results: list[FuncResult]) -> None:
    print(f"{title} = {len(results)}")
    for res in results:
        print(res.format())


def _try_statistics(title: str, results: list[FuncResult]) -> CalculationStatistics:
    try:
        stats = CalculationStatistics.from_results(results)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return CalculationStatistics()
    print(title)
    print(stats.format())
    return stats


def test_sum(
    size: int = 1_000_000,
    element_value: float = 0.001,
    threads_num: int = 4,
    params: TestParams | None = None,
) -> bool:
    """Run every summation method, summarise the timings and report speed-ups."""
    params = params or TestParams()

    vector = VectorRam(size)
    vector.init_by_val(element_value)

    vector_gpu: VectorGpu | None = None
    try:
        vector_gpu = VectorGpu(size)
        vector_gpu.init_by_val(element_value)
    except Exception as exc:  # noqa: BLE001
        print(exc, file=sys.stderr)

    results_seq = launch_sum(vector, params)
    _print_results("Seq: testResults_seq size", results_seq)
    results_par = launch_sum_threaded(vector, threads_num, params)
    _print_results("Parallel: testResults size", results_par)
    results_openmp = launch_sum_openmp(vector, threads_num, params)
    _print_results("Parallel OpenMP: testResults size", results_openmp)

    blocks_num = 10
    results_cuda = launch_sum_cuda(vector_gpu, blocks_num, threads_num, params)
    _print_results("Parallel CUDA: testResults size", results_cuda)

    stat_seq = CalculationStatistics.from_results(results_seq)
    print("CalculationStatistics seq: ")
    print(stat_seq.format())
    stat_par = CalculationStatistics.from_results(results_par)
    print("CalculationStatistics parallel std::thread: ")
    print(stat_par.format())
    stat_openmp = _try_statistics("CalculationStatistics parallel OpenMP: ", results_openmp)
    stat_cuda = _try_statistics("CalculationStatistics parallel Cuda: ", results_cuda)

    for label, stats, workers in (
        ("std::thread", stat_par, threads_num),
        ("OpenMP", stat_openmp, threads_num),
        ("CUDA", stat_cuda, blocks_num * threads_num),
    ):
        print(f"--- {label} ---")
        indicators = ParallelCalcIndicators.from_statistics(stat_seq, stats, workers)
        print(indicators.format())

    return True


test_sum.__test__ = False