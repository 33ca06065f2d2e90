import pytest

from hcsbench import benchmark
from hcsbench.arrays import VectorRam, sum_all
from hcsbench.cuda import CudaNotSupportedError


def _vector(size, value):
    vector = VectorRam(size)
    vector.init_by_val(value)
    return vector


def test_default_iterations():
    assert benchmark.TestParams().iter_num == 20


def test_timed_sum_matches_sequential_sum():
    vector = _vector(50, 0.5)
    res = benchmark.timed_sum(vector)
    assert res.status is True
    assert res.result == sum_all(vector.data)
    assert res.time >= 0


def test_timed_sum_partial_range():
    vector = VectorRam(6)
    vector.data = [1, 2, 3, 4, 5, 6]
    assert benchmark.timed_sum(vector, 1, 3).result == 2 + 3 + 4


def test_timed_sum_threaded_and_openmp_agree():
    vector = _vector(1000, 0.25)
    expected = sum_all(vector.data)
    assert benchmark.timed_sum_threaded(vector, 4).result == pytest.approx(expected)
    assert benchmark.timed_sum_openmp(vector, 3).result == pytest.approx(expected)


def test_launch_sum_repeats(capsys):
    vector = _vector(100, 1.5)
    results = benchmark.launch_sum(vector, benchmark.TestParams(iter_num=5))
    assert len(results) == 5
    assert {r.result for r in results} == {sum_all(vector.data)}
    out = capsys.readouterr().out
    assert "-------LaunchSum(VectorRam<T>& v) Start ------" in out


def test_launch_threaded_and_openmp_lengths():
    vector = _vector(200, 0.1)
    params = benchmark.TestParams(iter_num=3)
    threaded = benchmark.launch_sum_threaded(vector, 4, params)
    openmp = benchmark.launch_sum_openmp(vector, 4, params)
    assert len(threaded) == 3
    assert len(openmp) == 3
    expected = sum_all(vector.data)
    for res in threaded + openmp:
        assert res.result == pytest.approx(expected)


def test_launch_sum_cuda_empty_without_backend(capsys):
    results = benchmark.launch_sum_cuda(None, 10, 4, benchmark.TestParams(iter_num=3))
    assert results == []
    assert "LaunchSumCuda" in capsys.readouterr().out


def test_array_helper_check(capsys):
    assert benchmark.test_array_helper() is True
    assert "ArrayRamHelper::SumOpenMP(v.data, 0, v.size): 1\n" in capsys.readouterr().out


def test_vector_gpu_check_fails_without_backend(capsys):
    assert benchmark.test_vector_gpu() is False
    assert "CUDA not supported!" in capsys.readouterr().err


def test_sum_check_runs_every_method(capsys):
    ok = benchmark.test_sum(1000, 0.001, 4, benchmark.TestParams(iter_num=3))
    assert ok is True
    captured = capsys.readouterr()
    assert "--- std::thread ---" in captured.out
    assert "--- OpenMP ---" in captured.out
    assert "--- CUDA ---" in captured.out
    assert "N threads: 40" in captured.out
    assert "results size is 0" in captured.err