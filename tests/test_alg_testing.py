from pathlib import Path

from hcsbench.alg_testing import (
    AlgTestingResult,
    AlgTestingResultRepository,
    Task,
    TaskGroup,
)
from hcsbench.statistics import CalculationStatistics


def test_repository_creates_directory(tmp_path):
    target = tmp_path / "results"
    repo = AlgTestingResultRepository(str(target))
    assert target.is_dir()
    assert repo.data_path == f"{target}/1.txt"


def test_write_default_sample_record(tmp_path):
    repo = AlgTestingResultRepository(str(tmp_path / "r"))
    assert repo.write() is True
    content = Path(repo.data_path).read_text(encoding="utf-8")
    fields = content.split()
    assert fields[:2] == ["111", "222"]
    assert len(fields) == 17
    assert all(item == "0" for item in fields[2:])
    assert content.endswith(" \n")


def test_write_appends_records(tmp_path):
    repo = AlgTestingResultRepository(str(tmp_path / "r"))
    first = AlgTestingResult(result_id=1, comp_system_id=5, threads_num_cpu=4)
    second = AlgTestingResult(result_id=2, comp_system_id=5)
    repo.write(first)
    repo.write(second)
    lines = Path(repo.data_path).read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert lines[0].split()[0] == "1"
    assert lines[0].split()[7] == "4"
    assert lines[1].split()[0] == "2"


def test_statistics_fields_are_written_in_order(tmp_path):
    stats = CalculationStatistics(
        num_iter=20, min_value=10, max_value=40, avg=25.5,
        median=20, percentile_95=38.5, std_dev=2.5,
    )
    record = AlgTestingResult(result_id=7, calculation_statistics=stats)
    fields = record.to_line().split()
    assert fields[10:] == ["10", "20", "25.5", "38.5", "40", "2.5", "20"]


def test_existing_directory_is_reused(tmp_path):
    target = tmp_path / "r"
    repo = AlgTestingResultRepository(str(target))
    repo.write()
    again = AlgTestingResultRepository(str(target))
    again.write()
    lines = Path(again.data_path).read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2


def test_enums_start_at_none():
    assert TaskGroup(0) is TaskGroup.NONE
    assert Task(0) is Task.NONE
    assert list(Task)[-1] is Task.MAX
    assert len(TaskGroup) == 7