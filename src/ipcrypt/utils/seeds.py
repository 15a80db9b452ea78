"""Seeding for the random keys and blocks sampled by tests and benchmarks."""

import random

import numpy as np
import torch


def seed_everything(seed: int) -> None:
    """Seed the Python, NumPy and torch generators in one call.

    torch.manual_seed also seeds every CUDA device, so tensor batches drawn
    with torch.randint are reproducible on either device.
    """
    if seed < 0:
        raise ValueError(f"seed must be non-negative, got {seed}")
    random.seed(seed)
    np.random.seed(seed)
    torch.manual_seed(seed)
