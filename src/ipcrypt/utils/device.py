"""Device selection for the tensor path."""

from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    import torch


def resolve_device(device: Union[str, "torch.device"]) -> "torch.device":
    """Turn a device name into a usable torch.device.

    Accepts "cpu", "cuda", "cuda:N" or an existing torch.device.

    Raises:
        ValueError: If the device type is neither cpu nor cuda
        RuntimeError: If a CUDA device is requested but not present
    """
    import torch

    resolved = torch.device(device)
    if resolved.type == "cpu":
        return resolved
    if resolved.type != "cuda":
        raise ValueError(f"device must be cpu or cuda, got {device}")

    if not torch.cuda.is_available():
        raise RuntimeError(f"CUDA requested but not available: {device}")
    if resolved.index is not None and resolved.index >= torch.cuda.device_count():
        raise RuntimeError(
            f"CUDA device {resolved.index} requested, "
            f"only {torch.cuda.device_count()} present"
        )
    return resolved
