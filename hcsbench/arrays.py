"""Vectors held in host memory and the ways of summing their elements."""

from __future__ import annotations

import operator
import threading
from concurrent.futures import ThreadPoolExecutor
from functools import reduce
from typing import Iterable, Sequence


def _format_number(value: float) -> str:
    if isinstance(value, int):
        return str(value)
    return f"{value:g}"


def _accumulate(values: Iterable[float]) -> float:
    """Add values strictly left to right, starting from zero."""
    return reduce(operator.add, values, 0)


def _check_range(data: Sequence[float], ind_start: int, ind_end: int) -> None:
    if ind_start < 0:
        raise IndexError(f"start index {ind_start} is negative")
    if ind_end >= len(data) and ind_end >= ind_start:
        raise IndexError(
            f"end index {ind_end} is out of range for {len(data)} elements"
        )


def _check_threads(threads_num: int) -> None:
    if threads_num < 1:
        raise ValueError("threads_num must be at least 1")


class VectorRam:
    """A vector of numbers kept in host memory."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("vector size cannot be negative")
        self.data: list[float] = [0.0] * size

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index: int) -> float:
        return self.data[index]

    def __iter__(self):
        return iter(self.data)

    def init_by_val(self, value: float) -> None:
        """Set every element to ``value``."""
        self.data = [value] * len(self.data)

    def format(self) -> str:
        """Return the elements separated by spaces."""
        return " ".join(_format_number(item) for item in self.data)


def sum_range(data: Sequence[float], ind_start: int, ind_end: int) -> float:
    """Sum the elements from ``ind_start`` to ``ind_end`` inclusive, sequentially."""
    _check_range(data, ind_start, ind_end)
    return _accumulate(data[ind_start:ind_end + 1])


def sum_all(data: Sequence[float]) -> float:
    """Sum all elements sequentially."""
    return sum_range(data, 0, len(data) - 1)


def sum_threaded(
    data: Sequence[float], ind_start: int, ind_end: int, threads_num: int
) -> float:
    """Sum an inclusive range by splitting it into blocks, one thread per block.

    Each thread sums its block locally and adds the result to a shared total
    under a lock; the last thread takes any remainder.
    """
    _check_threads(threads_num)
    _check_range(data, ind_start, ind_end)

    lock = threading.Lock()
    total: list[float] = [0]

    def worker(start: int, end: int) -> None:
        local_sum = _accumulate(data[start:end + 1])
        with lock:
            total[0] += local_sum

    block_size = max(ind_end - ind_start + 1, 0)
    thread_block_size = block_size // threads_num
    threads = []
    for i in range(threads_num):
        start = ind_start + i * thread_block_size
        end = start + thread_block_size - 1
        if i == threads_num - 1:
            end = ind_end
        thread = threading.Thread(target=worker, args=(start, end))
        threads.append(thread)
        thread.start()

    for thread in threads:
        thread.join()

    return total[0]


def sum_all_threaded(data: Sequence[float], threads_num: int) -> float:
    """Sum all elements with ``threads_num`` threads."""
    return sum_threaded(data, 0, len(data) - 1, threads_num)


def sum_openmp(
    data: Sequence[float], ind_start: int, ind_end: int, threads_num: int
) -> float:
    """Sum an inclusive range as a parallel-for reduction over a worker pool.

    The range is split statically into ``threads_num`` contiguous chunks whose
    partial sums are then reduced.
    """
    _check_threads(threads_num)
    _check_range(data, ind_start, ind_end)

    length = max(ind_end - ind_start + 1, 0)
    base, extra = divmod(length, threads_num)
    chunks = []
    start = ind_start
    for i in range(threads_num):
        size = base + (1 if i < extra else 0)
        chunks.append((start, start + size))
        start += size

    with ThreadPoolExecutor(max_workers=threads_num) as pool:
        partials = list(pool.map(lambda bounds: _accumulate(data[bounds[0]:bounds[1]]), chunks))

    return _accumulate(partials)