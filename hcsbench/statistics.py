"""Timing results of repeated runs and their statistical summary."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")

_RELATIVE_TOLERANCE = 0.0001


def _format_number(value: float) -> str:
    if isinstance(value, int):
        return str(value)
    return f"{value:g}"


def _divide(numerator: float, denominator: float) -> float:
    """Divide like IEEE floating point: x/0 is infinite, 0/0 is NaN."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


@dataclass(frozen=True)
class FuncResult(Generic[T]):
    """Outcome of one timed run: status, computed value, time in microseconds."""

    status: bool
    result: T
    time: int

    def format(self) -> str:
        return f"[val: {_format_number(self.result)}; time: {_format_number(self.time)}]"


def _results_differ(value: float, reference: float) -> bool:
    if reference == 0:
        return value != 0
    return abs((value - reference) / reference) > _RELATIVE_TOLERANCE


@dataclass
class CalculationStatistics:
    """Statistics of the run times of a numerical experiment."""

    num_iter: int = 0
    min_value: float = 0
    max_value: float = 0
    avg: float = 0
    median: float = 0
    percentile_95: float = 0
    std_dev: float = 0

    @classmethod
    def from_results(cls, results: Sequence[FuncResult]) -> "CalculationStatistics":
        """Summarise run times; every run must succeed and agree on its value."""
        if not results:
            raise ValueError("results size is 0")

        reference = results[0].result
        for item in results:
            if not item.status:
                raise ValueError("a result has a failed status")
            if _results_differ(item.result, reference):
                raise ValueError(
                    "results differ from the first result by more than "
                    f"{_RELATIVE_TOLERANCE}"
                )

        times = sorted(item.time for item in results)
        count = len(times)

        if count % 2 == 0:
            median = (times[count // 2 - 1] + times[count // 2]) // 2
        else:
            median = times[count // 2]

        avg = sum(times) / count
        std_dev = math.sqrt(sum((t - avg) ** 2 for t in times) / count)

        rank = 0.95 * (count - 1) + 1
        lower = math.floor(rank)
        below = times[lower - 1]
        above = times[lower] if lower < count else below
        percentile_95 = below + (rank - lower) * (above - below)

        return cls(
            num_iter=count,
            min_value=times[0],
            max_value=times[-1],
            avg=avg,
            median=median,
            percentile_95=percentile_95,
            std_dev=std_dev,
        )

    def format(self) -> str:
        parts = [
            ("minValue", self.min_value),
            ("median", self.median),
            ("avg", self.avg),
            ("percentile_95", self.percentile_95),
            ("maxValue", self.max_value),
            ("stdDev", self.std_dev),
        ]
        return "".join(f"{name}: {_format_number(value)}; " for name, value in parts)


@dataclass(frozen=True)
class ParallelCalcIndicators:
    """Speed-up (S) and efficiency (E) of a parallel run against a sequential one."""

    threads_num: int
    s_min: float
    s_max: float
    s_avg: float
    s_median: float
    s_perc95: float
    e_min: float
    e_max: float
    e_avg: float
    e_median: float
    e_perc95: float

    @classmethod
    def from_statistics(
        cls,
        stat_seq: CalculationStatistics,
        stat_par: CalculationStatistics,
        threads_num: int,
    ) -> "ParallelCalcIndicators":
        s_min = _divide(stat_seq.min_value, stat_par.min_value)
        s_max = _divide(stat_seq.max_value, stat_par.max_value)
        s_avg = _divide(stat_seq.avg, stat_par.avg)
        s_median = _divide(stat_seq.median, stat_par.median)
        s_perc95 = _divide(stat_seq.percentile_95, stat_par.percentile_95)
        return cls(
            threads_num=threads_num,
            s_min=s_min,
            s_max=s_max,
            s_avg=s_avg,
            s_median=s_median,
            s_perc95=s_perc95,
            e_min=_divide(s_min, threads_num),
            e_max=_divide(s_max, threads_num),
            e_avg=_divide(s_avg, threads_num),
            e_median=_divide(s_median, threads_num),
            e_perc95=_divide(s_perc95, threads_num),
        )

    def format(self) -> str:
        lines = [f"N threads: {self.threads_num}"]
        lines += [
            f"{name}: {_format_number(value)}"
            for name, value in (
                ("Smin", self.s_min),
                ("Smax", self.s_max),
                ("Savg", self.s_avg),
                ("Smedian", self.s_median),
                ("Sperc95", self.s_perc95),
                ("Emin", self.e_min),
                ("Emax", self.e_max),
                ("Eavg", self.e_avg),
                ("Emedian", self.e_median),
                ("Eperc95", self.e_perc95),
            )
        ]
        return "\n".join(lines)