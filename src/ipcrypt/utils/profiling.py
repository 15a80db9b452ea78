"""Performance profiling utilities."""

import time
from contextlib import contextmanager
from typing import Generator, Optional

import torch


class Timer:
    """Elapsed wall-clock time of a block, filled in on exit."""

    def __init__(self) -> None:
        self.elapsed: Optional[float] = None


@contextmanager
def timer(name: str, use_cuda_sync: bool = True) -> Generator[Timer, None, None]:
    """Context manager for profiling execution time.

    Args:
        name: Name identifier for the profiled operation
        use_cuda_sync: If True, synchronize CUDA before timing (default: True)

    Yields:
        Timer whose ``elapsed`` is set in seconds when the block exits

    Example:
        >>> with timer("encrypt batch") as t:
        ...     result = expensive_operation()
        >>> t.elapsed > 0
        True
    """
    sync = use_cuda_sync and torch.cuda.is_available()
    t = Timer()

    if sync:
        torch.cuda.synchronize()
    start = time.perf_counter()

    yield t

    if sync:
        torch.cuda.synchronize()
    t.elapsed = time.perf_counter() - start
    print(f"{name}: {t.elapsed:.4f}s")


def blocks_per_second(num_blocks: int, elapsed_seconds: float) -> float:
    """Calculate blocks per second from block count and elapsed time.

    Returns:
        Blocks per second (0.0 if elapsed_seconds <= 0)
    """
    if elapsed_seconds <= 0:
        return 0.0
    return num_blocks / elapsed_seconds
