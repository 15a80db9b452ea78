#!/usr/bin/env python3
"""Micro-benchmark for IPCrypt throughput.

Measures per-block encrypt() against batched encrypt_tensor() on CPU and,
when available, CUDA. Not part of unit test suite.
"""

import random
from typing import Any, Dict

import torch

from ipcrypt import encrypt, encrypt_tensor, get_logger, key_setup, seed_everything
from ipcrypt.utils import blocks_per_second, timer


def benchmark_scalar(key, blocks: list[bytes]) -> Dict[str, Any]:
    """Benchmark encrypt() one block at a time."""
    with timer("encrypt()", use_cuda_sync=False) as t:
        for block in blocks:
            encrypt(key, block)

    return {
        "method": "encrypt()",
        "device": "cpu",
        "blocks": len(blocks),
        "total_sec": t.elapsed,
        "blocks_per_sec": blocks_per_second(len(blocks), t.elapsed),
    }


def benchmark_tensor(key, x: torch.Tensor, num_warmup: int = 3) -> Dict[str, Any]:
    """Benchmark encrypt_tensor() on one batch."""
    # Warmup
    for _ in range(num_warmup):
        encrypt_tensor(key, x[:1024])

    with timer(f"encrypt_tensor() [{x.device}]") as t:
        encrypt_tensor(key, x)

    return {
        "method": "encrypt_tensor()",
        "device": str(x.device),
        "blocks": x.shape[0],
        "total_sec": t.elapsed,
        "blocks_per_sec": blocks_per_second(x.shape[0], t.elapsed),
    }


def main():
    """Run IPCrypt benchmarks."""
    seed_everything(42)
    logger = get_logger("bench")

    key = key_setup(bytes(random.randrange(256) for _ in range(16)))
    num_scalar = 100_000
    batch_sizes = [2**12, 2**16, 2**20]

    print("=" * 80)
    print("IPCrypt Throughput Benchmark")
    print("=" * 80)

    blocks = [bytes(random.randrange(256) for _ in range(4)) for _ in range(num_scalar)]
    scalar = benchmark_scalar(key, blocks)
    logger.info(
        "%-20s %8d blocks  %12.0f blocks/sec",
        scalar["method"], scalar["blocks"], scalar["blocks_per_sec"],
    )

    devices = [torch.device("cpu")]
    if torch.cuda.is_available():
        devices.append(torch.device("cuda"))

    for device in devices:
        for n in batch_sizes:
            x = torch.randint(0, 256, (n, 4), dtype=torch.uint8, device=device)
            result = benchmark_tensor(key, x)
            logger.info(
                "%-20s %8d blocks  %12.0f blocks/sec  (%s, %.1fx scalar)",
                result["method"], result["blocks"], result["blocks_per_sec"],
                result["device"], result["blocks_per_sec"] / scalar["blocks_per_sec"],
            )

    print("=" * 80)


if __name__ == "__main__":
    main()
