"""GPU device information, GPU-resident vectors and GPU summation.

This build has no GPU compute backend, so every operation that needs one
raises :class:`CudaNotSupportedError`. Device queries report no devices.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

_NOT_SUPPORTED = "CUDA not supported!"
_SPECS_NOT_SUPPORTED = "printDevProp(): CUDA is not supported!"


class CudaNotSupportedError(RuntimeError):
    """Raised when an operation needs a GPU compute backend that is absent."""

    def __init__(self, message: str = _NOT_SUPPORTED) -> None:
        super().__init__(message)


def is_cuda_supported() -> bool:
    """Return whether a GPU compute backend is available."""
    return False


def _require_cuda() -> None:
    if not is_cuda_supported():
        raise CudaNotSupportedError()


def cuda_device_count() -> int:
    """Return the number of GPU compute devices."""
    return 0


@dataclass
class CudaDeviceProperties:
    """Parameters of a GPU device."""

    is_initialized: bool = False
    major: int = 0
    minor: int = 0
    name: str = ""
    total_global_mem: int = 0
    shared_memory_per_block: int = 0
    regs_per_block: int = 0
    warp_size: int = 0
    mem_pitch: int = 0
    max_threads_per_block: int = 0
    multi_processor_count: int = 0
    device_overlap: bool = False
    async_engine_count: int = 0
    memory_clock_rate: int = 0  # kHz
    memory_bus_width: int = 0  # bits

    def peak_memory_bandwidth_gbs(self) -> float:
        """Peak memory bandwidth in GB/s."""
        return 2.0 * self.memory_clock_rate * (self.memory_bus_width // 8) / 1.0e6

    def format(self) -> str:
        if not self.is_initialized:
            return "CudaDeviceProperties object is not initialized!"
        rows = [
            ("Major revision number:         ", self.major),
            ("Minor revision number:         ", self.minor),
            ("Name:                          ", self.name),
            ("Total global memory:           ", self.total_global_mem),
            ("Total shared memory per block: ", self.shared_memory_per_block),
            ("Total registers per block:     ", self.regs_per_block),
            ("Warp size:                     ", self.warp_size),
            ("Maximum memory pitch:          ", self.mem_pitch),
            ("Maximum threads per block:     ", self.max_threads_per_block),
            ("Number of multiprocessors:     ", self.multi_processor_count),
            ("Number of asynchronous engines: ", self.async_engine_count),
            ("Memory Clock Rate (KHz):        ", self.memory_clock_rate),
            ("Memory Bus Width (bits):        ", self.memory_bus_width),
            (
                "Peak Memory Bandwidth (GB/s):   ",
                f"{self.peak_memory_bandwidth_gbs():g}",
            ),
        ]
        return "\n".join(f"{label}{value}" for label, value in rows)


def get_cuda_device_properties(device_id: int = 0) -> CudaDeviceProperties:
    """Return the properties of a device; uninitialised when no backend exists."""
    if not is_cuda_supported() or not 0 <= device_id < cuda_device_count():
        return CudaDeviceProperties()
    return CudaDeviceProperties(is_initialized=True)


def print_cuda_device_properties(device_id: int = 0) -> None:
    """Print the properties of a device to standard output."""
    props = get_cuda_device_properties(device_id)
    if not props.is_initialized:
        print(_SPECS_NOT_SUPPORTED)
        return
    print(f"\nCUDA Device #{device_id}")
    print(props.format())


def write_gpu_specs(out: TextIO) -> None:
    """Write a summary of every GPU device to a text stream."""
    if not is_cuda_supported():
        out.write(_SPECS_NOT_SUPPORTED + "\n")
        return
    out.write("WriteGpuSpecs()\n")
    for i in range(cuda_device_count()):
        prop = get_cuda_device_properties(i)
        out.write(f"Device Number: {i}\n")
        out.write(f"  Device name: {prop.name}\n")
        out.write(f"  Compute capability: {prop.major}.{prop.minor}\n")
        out.write(f"  MultiProcessorCount: {prop.multi_processor_count}\n")
        out.write(
            f"  asyncEngineCount: {prop.async_engine_count}"
            " (Number of asynchronous engines)\n"
        )
        out.write(f"  Memory Clock Rate (KHz): {prop.memory_clock_rate}\n")
        out.write(f"  Memory Bus Width (bits): {prop.memory_bus_width}\n")
        out.write(
            "  Peak Memory Bandwidth (GB/s): "
            f"{prop.peak_memory_bandwidth_gbs():g}\n"
        )


@dataclass
class LibSupport:
    """Which parallel back ends are available."""

    is_openmp: bool = True
    is_cuda: bool = field(default_factory=is_cuda_supported)

    def format(self) -> str:
        libs = "".join(
            f"{name} "
            for name, present in (("OpenMP", self.is_openmp), ("CUDA", self.is_cuda))
            if present
        )
        return f"Supported libs: {libs}"


class VectorGpu:
    """A vector of numbers kept in GPU memory."""

    def __init__(self, size: int) -> None:
        self.size = size
        self._device_data: list[float] | None = None
        self.is_initialized = False
        _require_cuda()
        if size == 0:
            raise ValueError("Cannot initialize vector of _size = 0")
        self._device_data = [0.0] * size

    def __len__(self) -> int:
        return self.size

    def check_state(self) -> bool:
        """Return whether the vector holds initialised device data."""
        return self.is_initialized and self.size >= 1 and self._device_data is not None

    def init_by_val(self, value: float) -> None:
        """Set every element to ``value``."""
        _require_cuda()
        self._device_data = [value] * self.size
        self.is_initialized = True

    def init_by_range(self, start: float, end: float) -> None:
        """Fill the vector with evenly spaced numbers from ``start`` to ``end``."""
        _require_cuda()
        step = (end - start) / (self.size - 1)
        values: list[float] = []
        current = start
        while current < end + step / 2 and len(values) < self.size:
            values.append(current)
            current += step
        values.extend([0.0] * (self.size - len(values)))
        self._device_data = values
        self.is_initialized = True

    def clear(self) -> None:
        """Release the device memory."""
        _require_cuda()
        if self._device_data is not None:
            self._device_data = None
            self.is_initialized = False


def sum_cuda(
    vector: VectorGpu,
    ind_start: int,
    ind_end: int,
    blocks_num: int,
    threads_num: int,
) -> float:
    """Sum an inclusive range of a GPU vector with a block reduction."""
    _require_cuda()
    data = vector._device_data or []
    length = ind_end - ind_start + 1
    total_threads = blocks_num * threads_num
    block_sums = [0.0] * blocks_num
    for thread_id in range(total_threads):
        local = sum(data[ind_start + i] for i in range(thread_id, length, total_threads))
        block_sums[thread_id // threads_num] += local
    return sum(block_sums)