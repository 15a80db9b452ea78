"""Quick start guide for IPCrypt.

Demonstrates:
1. Encrypting bytes and dotted-quad addresses
2. Key setup padding and truncation
3. Batched encryption with torch tensors
4. Building a cipher from a YAML config
"""

import tempfile
from pathlib import Path

import torch

from ipcrypt import CipherConfig, IPCrypt, decrypt, encrypt, encrypt_tensor, key_setup


def example_1_basic_usage():
    """Example 1: Encrypt one block and one address."""
    print("=" * 60)
    print("Example 1: Basic Usage")
    print("=" * 60)

    key = key_setup(b"\xff" * 16)
    block = bytes([1, 2, 3, 4])
    ciphertext = encrypt(key, block)
    print(f"encrypt({list(block)}) = {list(ciphertext)}")
    print(f"decrypt(...)        = {list(decrypt(key, ciphertext))}")

    cipher = IPCrypt(key)
    address = cipher.encrypt_ip("192.0.2.1")
    print(f"192.0.2.1 -> {address} -> {cipher.decrypt_ip(address)}")
    print()


def example_2_key_setup():
    """Example 2: Short keys are zero-padded, long keys truncated."""
    print("=" * 60)
    print("Example 2: Key Setup")
    print("=" * 60)

    short = key_setup(b"secret")
    long = key_setup(b"a very long passphrase indeed")
    print(f"short key raw: {short.raw.hex()}")
    print(f"long key raw:  {long.raw.hex()}")
    print(f"long key words: {[hex(w) for w in long.words]}")
    print()


def example_3_batched():
    """Example 3: Encrypt many addresses at once."""
    print("=" * 60)
    print("Example 3: Batched Encryption")
    print("=" * 60)

    key = key_setup(b"batch key")
    x = torch.tensor([[10, 0, 0, i] for i in range(1, 6)], dtype=torch.uint8)
    y = encrypt_tensor(key, x)
    for row_in, row_out in zip(x.tolist(), y.tolist()):
        print(f"  {'.'.join(map(str, row_in)):>15} -> {'.'.join(map(str, row_out))}")
    print()


def example_4_config():
    """Example 4: Build a cipher from YAML."""
    print("=" * 60)
    print("Example 4: YAML Config")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "ipcrypt.yaml"
        path.write_text('key_hex: "000102030405060708090a0b0c0d0e0f"\ndevice: cpu\n')
        cipher = CipherConfig.from_file(path).build()
        print(f"10.1.2.3 -> {cipher.encrypt_ip('10.1.2.3')}")
    print()


def main():
    """Run all examples."""
    example_1_basic_usage()
    example_2_key_setup()
    example_3_batched()
    example_4_config()


if __name__ == "__main__":
    main()
