"""Tests for the vectorized tensor path."""

import random

import numpy as np
import pytest
import torch

from ipcrypt.cipher.ipcrypt import IPCrypt, decrypt, encrypt
from ipcrypt.cipher.key import key_setup
from ipcrypt.cipher.rounds import bwd, fwd
from ipcrypt.cipher.tensor import bwd_tensor, decrypt_tensor, encrypt_tensor, fwd_tensor


def test_rounds_match_scalar() -> None:
    x = torch.randint(0, 256, (2000, 4), dtype=torch.int64)
    y = fwd_tensor(x)
    for row_in, row_out in zip(x.tolist(), y.tolist()):
        assert tuple(row_out) == fwd(tuple(row_in))

    z = bwd_tensor(x)
    for row_in, row_out in zip(x.tolist(), z.tolist()):
        assert tuple(row_out) == bwd(tuple(row_in))


def test_bwd_tensor_inverts_fwd_tensor() -> None:
    x = torch.randint(0, 256, (50_000, 4), dtype=torch.int64)
    assert torch.equal(bwd_tensor(fwd_tensor(x)), x)


def test_encrypt_tensor_bit_exact() -> None:
    """encrypt_tensor matches encrypt for every row."""
    random.seed(42)
    for _ in range(5):
        key = key_setup(bytes(random.randrange(256) for _ in range(16)))
        x = torch.randint(0, 256, (500, 4), dtype=torch.uint8)

        y = encrypt_tensor(key, x)
        expected = torch.tensor(
            [list(encrypt(key, bytes(row))) for row in x.tolist()], dtype=torch.uint8
        )
        assert torch.equal(y, expected)

        back = decrypt_tensor(key, y)
        assert torch.equal(back, x)
        expected_back = torch.tensor(
            [list(decrypt(key, bytes(row))) for row in y.tolist()], dtype=torch.uint8
        )
        assert torch.equal(back, expected_back)


def test_known_answer_tensor(ff_key) -> None:
    x = torch.tensor([[1, 2, 3, 4]], dtype=torch.uint8)
    for _ in range(100):
        x = encrypt_tensor(ff_key, x)
    assert x.tolist() == [[107, 47, 222, 186]]
    for _ in range(100):
        x = decrypt_tensor(ff_key, x)
    assert x.tolist() == [[1, 2, 3, 4]]


def test_bijection_over_two_lanes(ff_key) -> None:
    """All 2^16 blocks with lanes 0 and 1 varying encrypt to distinct values."""
    hi = torch.arange(256, dtype=torch.int64).repeat_interleave(256)
    lo = torch.arange(256, dtype=torch.int64).repeat(256)
    x = torch.stack([lo, hi, torch.full_like(lo, 7), torch.full_like(lo, 9)], dim=-1)

    y = encrypt_tensor(ff_key, x)
    packed = y[:, 0] | (y[:, 1] << 8) | (y[:, 2] << 16) | (y[:, 3] << 24)
    assert len(torch.unique(packed)) == 256 * 256
    assert torch.equal(decrypt_tensor(ff_key, y), x)


def test_preserves_shape_and_dtype(ff_key) -> None:
    for dtype in (torch.uint8, torch.int16, torch.int32, torch.int64):
        x = torch.randint(0, 256, (3, 5, 4), dtype=torch.int64).to(dtype)
        y = encrypt_tensor(ff_key, x)
        assert y.shape == x.shape
        assert y.dtype == dtype


def test_empty_batch(ff_key) -> None:
    x = torch.empty((0, 4), dtype=torch.uint8)
    assert encrypt_tensor(ff_key, x).shape == (0, 4)


def test_numpy_input(ff_key) -> None:
    x = np.array([[1, 2, 3, 4]], dtype=np.uint8)
    y = encrypt_tensor(ff_key, x)
    assert isinstance(y, torch.Tensor)
    assert y.tolist() == [list(encrypt(ff_key, b"\x01\x02\x03\x04"))]


def test_ipcrypt_tensor_methods(ff_key) -> None:
    cipher = IPCrypt(ff_key)
    x = torch.randint(0, 256, (100, 4), dtype=torch.uint8)
    assert torch.equal(cipher.decrypt_tensor(cipher.encrypt_tensor(x)), x)


def test_rejects_bad_input(ff_key) -> None:
    with pytest.raises(TypeError, match="torch.Tensor"):
        encrypt_tensor(ff_key, [[1, 2, 3, 4]])
    with pytest.raises(TypeError, match="integer dtype"):
        encrypt_tensor(ff_key, torch.zeros((2, 4), dtype=torch.float32))
    with pytest.raises(TypeError, match="int8"):
        encrypt_tensor(ff_key, torch.zeros((2, 4), dtype=torch.int8))
    with pytest.raises(ValueError, match=r"\[\.\.\., 4\]"):
        encrypt_tensor(ff_key, torch.zeros((2, 3), dtype=torch.uint8))
    with pytest.raises(ValueError, match=r"\[0, 256\)"):
        decrypt_tensor(ff_key, torch.tensor([[0, 0, 0, 256]], dtype=torch.int64))
    with pytest.raises(ValueError, match=r"\[0, 256\)"):
        decrypt_tensor(ff_key, torch.tensor([[0, -1, 0, 0]], dtype=torch.int64))


@pytest.mark.skipif(not torch.cuda.is_available(), reason="CUDA not available")
def test_cpu_gpu_equivalence(ff_key) -> None:
    x = torch.randint(0, 256, (1000, 4), dtype=torch.uint8)
    y_cpu = encrypt_tensor(ff_key, x)
    y_gpu = encrypt_tensor(ff_key, x.cuda())
    assert y_gpu.device.type == "cuda"
    assert torch.equal(y_cpu, y_gpu.cpu())


def test_explicit_cpu_device(ff_key) -> None:
    x = torch.randint(0, 256, (10, 4), dtype=torch.uint8)
    y = encrypt_tensor(ff_key, x, device="cpu")
    assert y.device == torch.device("cpu")
    assert torch.equal(decrypt_tensor(ff_key, y, device=torch.device("cpu")), x)


def test_ipcrypt_without_device_keeps_input_device(ff_key) -> None:
    cipher = IPCrypt(ff_key)
    assert cipher.device is None
    x = torch.randint(0, 256, (10, 4), dtype=torch.uint8)
    assert cipher.encrypt_tensor(x).device == x.device
