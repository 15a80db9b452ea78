"""Vectorized IPCrypt over torch tensors.

Operates on integer tensors of shape [..., 4], one block per trailing row,
with the same lane order as the scalar path (x[..., i] is lane i). Lanes are
widened to int64 and masked with U8_MASK after every add, subtract and
rotate, so results are bit-identical to ``ipcrypt.cipher.ipcrypt`` on CPU
and CUDA alike.
"""

from typing import Optional, Union

import numpy as np
import torch

from .key import Key
from .lanes import U8_MASK


def _rotl8(x: torch.Tensor, r: int) -> torch.Tensor:
    """Rotate int64 lane tensor left by r bits within 8 bits."""
    return ((x << r) | (x >> (8 - r))) & U8_MASK


def _split(x: torch.Tensor) -> tuple[torch.Tensor, torch.Tensor, torch.Tensor, torch.Tensor]:
    """Split [..., 4] tensor into four int64 lane tensors."""
    x = x.to(torch.int64)
    return x[..., 0], x[..., 1], x[..., 2], x[..., 3]


def _whiten(x: torch.Tensor, lanes: tuple[int, int, int, int]) -> torch.Tensor:
    """Xor every block in x with one key word."""
    k = torch.tensor(lanes, dtype=torch.int64, device=x.device)
    return x ^ k


def _check_blocks(x) -> torch.Tensor:
    """Validate block tensor shape, dtype and range.

    Args:
        x: torch tensor (or numpy array) of shape [..., 4]

    Returns:
        x as a torch tensor

    Raises:
        TypeError: If x is not a tensor or not of an integer dtype
        ValueError: If the last dimension is not 4 or a value is outside [0, 256)
    """
    if isinstance(x, np.ndarray):
        x = torch.as_tensor(x)
    if not isinstance(x, torch.Tensor):
        raise TypeError(f"x must be torch.Tensor, got {type(x)}")
    if x.dtype.is_floating_point or x.dtype.is_complex or x.dtype == torch.bool:
        raise TypeError(f"x must have an integer dtype, got {x.dtype}")
    if x.dtype == torch.int8:
        raise TypeError("x must not be int8, lanes need the full [0, 256) range")
    if x.dim() == 0 or x.shape[-1] != 4:
        raise ValueError(f"x must have shape [..., 4], got {tuple(x.shape)}")
    if x.numel() > 0:
        wide = x.to(torch.int64)
        if wide.min() < 0 or wide.max() > U8_MASK:
            raise ValueError("x values must be in [0, 256)")
    return x


def fwd_tensor(x: torch.Tensor) -> torch.Tensor:
    """Forward round over a [..., 4] int64 lane tensor.

    Args:
        x: Lane tensor, values in [0, 256)

    Returns:
        Mixed int64 lane tensor of the same shape
    """
    b0, b1, b2, b3 = _split(x)

    b0 = (b0 + b1) & U8_MASK
    b2 = (b2 + b3) & U8_MASK
    b1 = _rotl8(b1, 2)
    b3 = _rotl8(b3, 5)
    b1 = b1 ^ b0
    b3 = b3 ^ b2
    b0 = _rotl8(b0, 4)

    b0 = (b0 + b3) & U8_MASK
    b2 = (b2 + b1) & U8_MASK
    b1 = _rotl8(b1, 3)
    b3 = _rotl8(b3, 7)
    b1 = b1 ^ b2
    b3 = b3 ^ b0
    b2 = _rotl8(b2, 4)

    return torch.stack([b0, b1, b2, b3], dim=-1)


def bwd_tensor(x: torch.Tensor) -> torch.Tensor:
    """Backward round over a [..., 4] int64 lane tensor.

    Subtraction on int64 followed by the mask gives the mod-256 result
    for negative intermediates as well.
    """
    b0, b1, b2, b3 = _split(x)

    b2 = _rotl8(b2, 4)
    b1 = b1 ^ b2
    b3 = b3 ^ b0
    b1 = _rotl8(b1, 5)
    b3 = _rotl8(b3, 1)
    b0 = (b0 - b3) & U8_MASK
    b2 = (b2 - b1) & U8_MASK

    b0 = _rotl8(b0, 4)
    b1 = b1 ^ b0
    b3 = b3 ^ b2
    b1 = _rotl8(b1, 6)
    b3 = _rotl8(b3, 3)
    b0 = (b0 - b1) & U8_MASK
    b2 = (b2 - b3) & U8_MASK

    return torch.stack([b0, b1, b2, b3], dim=-1)


def encrypt_tensor(
    key: Key, x: torch.Tensor, device: Optional[Union[str, torch.device]] = None
) -> torch.Tensor:
    """Encrypt a batch of blocks.

    Args:
        key: Expanded key
        x: Integer tensor of shape [..., 4], values in [0, 256)
        device: If given, x is moved there before encryption

    Returns:
        Ciphertext tensor with the shape and dtype of x, on ``device`` if given
        and on the device of x otherwise

    Example:
        >>> key = Key(b"\\xff" * 16)
        >>> y = encrypt_tensor(key, torch.tensor([[1, 2, 3, 4]], dtype=torch.uint8))
        >>> y.shape
        torch.Size([1, 4])
    """
    x = _check_blocks(x)
    if device is not None:
        x = x.to(device)
    k0, k1, k2, k3 = key.lanes

    s = x.to(torch.int64)
    s = fwd_tensor(_whiten(s, k0))
    s = fwd_tensor(_whiten(s, k1))
    s = fwd_tensor(_whiten(s, k2))
    s = _whiten(s, k3)

    return s.to(x.dtype)


def decrypt_tensor(
    key: Key, x: torch.Tensor, device: Optional[Union[str, torch.device]] = None
) -> torch.Tensor:
    """Decrypt a batch of blocks.

    Args:
        key: Expanded key
        x: Integer tensor of shape [..., 4], values in [0, 256)
        device: If given, x is moved there before decryption

    Returns:
        Plaintext tensor with the shape and dtype of x, on ``device`` if given
        and on the device of x otherwise
    """
    x = _check_blocks(x)
    if device is not None:
        x = x.to(device)
    k0, k1, k2, k3 = key.lanes

    s = x.to(torch.int64)
    s = bwd_tensor(_whiten(s, k3))
    s = bwd_tensor(_whiten(s, k2))
    s = bwd_tensor(_whiten(s, k1))
    s = _whiten(s, k0)

    return s.to(x.dtype)
