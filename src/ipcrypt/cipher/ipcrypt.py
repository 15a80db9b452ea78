"""IPCrypt cipher driver.

Encryption whitens the state with key word 0, runs a forward round, and
repeats for words 1 and 2; key word 3 is a final whitening with no round
after it. Decryption mirrors this with the key words reversed and ``bwd``
in place of ``fwd``. The result is a keyed permutation of all 2^32 blocks,
so an IPv4 address always encrypts to another IPv4 address.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from ipcrypt.cipher.key import Key, key_setup
from ipcrypt.cipher.lanes import xor_lanes
from ipcrypt.cipher.rounds import bwd, fwd
from ipcrypt.cipher.state import BlockLike, as_block, block_to_ip, decode, encode

if TYPE_CHECKING:
    import torch


def encrypt(key: Key, block: BlockLike) -> bytes:
    """Encrypt a 4-byte block.

    Args:
        key: Expanded key from key_setup()
        block: Plaintext block in any form accepted by as_block()

    Returns:
        Ciphertext block (4 bytes)

    Example:
        >>> key = key_setup(b"\\xff" * 16)
        >>> len(encrypt(key, b"\\x01\\x02\\x03\\x04"))
        4
    """
    k0, k1, k2, k3 = key.lanes
    s = decode(as_block(block))

    s = fwd(xor_lanes(s, k0))
    s = fwd(xor_lanes(s, k1))
    s = fwd(xor_lanes(s, k2))
    s = xor_lanes(s, k3)

    return encode(s)


def decrypt(key: Key, block: BlockLike) -> bytes:
    """Decrypt a 4-byte block.

    Args:
        key: Expanded key from key_setup()
        block: Ciphertext block in any form accepted by as_block()

    Returns:
        Plaintext block (4 bytes)
    """
    k0, k1, k2, k3 = key.lanes
    s = decode(as_block(block))

    s = bwd(xor_lanes(s, k3))
    s = bwd(xor_lanes(s, k2))
    s = bwd(xor_lanes(s, k1))
    s = xor_lanes(s, k0)

    return encode(s)


@dataclass(frozen=True)
class IPCrypt:
    """Keyed IPCrypt cipher.

    Holds one expanded key and exposes byte, dotted-quad and tensor entry
    points. Instances are immutable and safe to share.

    Attributes:
        key: Expanded key
        device: Device the tensor entry points move input onto; None keeps
            each tensor on the device it arrives on
    """

    key: Key
    device: Optional["torch.device"] = None

    def __post_init__(self) -> None:
        """Validate parameters."""
        if not isinstance(self.key, Key):
            raise TypeError(f"key must be a Key, got {type(self.key).__name__}")

    @classmethod
    def from_material(
        cls,
        material: Union[bytes, bytearray, memoryview],
        device: Optional["torch.device"] = None,
    ) -> "IPCrypt":
        """Build a cipher from raw key material (padded or truncated to 16 bytes)."""
        return cls(key_setup(material), device=device)

    def encrypt(self, block: BlockLike) -> bytes:
        """Encrypt one block."""
        return encrypt(self.key, block)

    def decrypt(self, block: BlockLike) -> bytes:
        """Decrypt one block."""
        return decrypt(self.key, block)

    def encrypt_ip(self, address: BlockLike) -> str:
        """Encrypt an IPv4 address and return it as a dotted-quad string.

        Example:
            >>> cipher = IPCrypt.from_material(b"\\xff" * 16)
            >>> cipher.decrypt_ip(cipher.encrypt_ip("192.0.2.1"))
            '192.0.2.1'
        """
        return block_to_ip(self.encrypt(address))

    def decrypt_ip(self, address: BlockLike) -> str:
        """Decrypt an IPv4 address and return it as a dotted-quad string."""
        return block_to_ip(self.decrypt(address))

    def encrypt_tensor(self, x: "torch.Tensor") -> "torch.Tensor":
        """Encrypt a batch of blocks shaped [..., 4], on ``device`` if set."""
        from ipcrypt.cipher.tensor import encrypt_tensor

        return encrypt_tensor(self.key, x, device=self.device)

    def decrypt_tensor(self, x: "torch.Tensor") -> "torch.Tensor":
        """Decrypt a batch of blocks shaped [..., 4], on ``device`` if set."""
        from ipcrypt.cipher.tensor import decrypt_tensor

        return decrypt_tensor(self.key, x, device=self.device)
