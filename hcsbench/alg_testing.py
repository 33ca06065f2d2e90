"""Records of algorithm test runs and the repository that stores them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from hcsbench.filesystem import combine_path, create_dir, is_dir_exists
from hcsbench.statistics import CalculationStatistics


class TaskGroup(IntEnum):
    """Groups of tasks."""

    NONE = 0
    VECTOR = 1
    VEC_VEC = 2
    MATRIX = 3
    MAT_VEC = 4
    VEC_MAT = 5
    MAT_MAT = 6


class Task(IntEnum):
    """Tasks within a group."""

    NONE = 0
    INIT = 1
    COPY = 2
    SUM = 3
    MIN = 4
    MAX = 5


def _format_number(value: float) -> str:
    if isinstance(value, int):
        return str(value)
    return f"{value:g}"


@dataclass
class AlgTestingResult:
    """Result of one test launch of an algorithm.

    ``algorithm_type``: 1 sequential CPU, 2 sequential GPU, 3 parallel CPU
    threads, 4 parallel CPU parallel-for, 5 parallel GPU.
    """

    result_id: int = 0
    comp_system_id: int = 0
    task_group_id: int = 0
    task_id: int = 0
    algorithm_id: int = 0
    algorithm_data_type_length: int = 0
    algorithm_type: int = 0
    threads_num_cpu: int = 0
    thread_blocks_num_gpu: int = 0
    threads_num_gpu: int = 0
    calculation_statistics: CalculationStatistics = field(
        default_factory=CalculationStatistics
    )

    def to_line(self) -> str:
        """Return the record as one space-separated line."""
        stats = self.calculation_statistics
        values = [
            self.result_id,
            self.comp_system_id,
            self.task_group_id,
            self.task_id,
            self.algorithm_id,
            self.algorithm_data_type_length,
            self.algorithm_type,
            self.threads_num_cpu,
            self.thread_blocks_num_gpu,
            self.threads_num_gpu,
            stats.min_value,
            stats.median,
            stats.avg,
            stats.percentile_95,
            stats.max_value,
            stats.std_dev,
            stats.num_iter,
        ]
        return "".join(f"{_format_number(value)} " for value in values) + "\n"


class AlgTestingResultRepository:
    """Directory holding appended records of algorithm test runs."""

    data_file = "1.txt"

    def __init__(self, dir_name: str = "AlgTestingResultRepository") -> None:
        self.dir_name = dir_name
        if not is_dir_exists(self.dir_name):
            create_dir(self.dir_name)

    @property
    def data_path(self) -> str:
        return combine_path(self.dir_name, self.data_file)

    def write(self, result: AlgTestingResult | None = None) -> bool:
        """Append a record to the data file.

        Without a record, a sample one (id 111, computing system 222) is written.
        """
        if result is None:
            result = AlgTestingResult(result_id=111, comp_system_id=222)
        with open(self.data_path, "a", encoding="utf-8") as out:
            out.write(result.to_line())
        return True