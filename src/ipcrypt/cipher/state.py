"""State codec and block boundary layer.

A block is the external 4-byte value; the state is the same 4 bytes viewed
as lanes (b0, b1, b2, b3), byte i being lane i. ``as_block`` is the only
place where loosely typed input is checked and normalized, so the cipher
itself never has to fail.
"""

import ipaddress
from typing import Sequence, Union

BLOCK_SIZE = 4

State = tuple[int, int, int, int]
BlockLike = Union[bytes, bytearray, memoryview, Sequence[int], str, ipaddress.IPv4Address]


def as_block(value: BlockLike) -> bytes:
    """Normalize any supported block form to 4 bytes.

    Accepted forms: bytes-like of length 4, a sequence of 4 ints in
    [0, 256), an ``ipaddress.IPv4Address`` or a dotted-quad string.

    Args:
        value: Block in any supported form

    Returns:
        The block as ``bytes`` of length 4

    Raises:
        ValueError: Wrong length, lane out of range or malformed address
        TypeError: Unsupported input type
    """
    if isinstance(value, ipaddress.IPv4Address):
        return value.packed
    if isinstance(value, str):
        try:
            return ipaddress.IPv4Address(value).packed
        except ipaddress.AddressValueError as exc:
            raise ValueError(f"invalid IPv4 address: {value!r}") from exc

    if isinstance(value, (bytes, bytearray, memoryview)):
        block = bytes(value)
    elif isinstance(value, Sequence):
        if not all(isinstance(b, int) for b in value):
            raise TypeError("block lanes must be ints")
        if not all(0 <= b < 256 for b in value):
            raise ValueError(f"block lanes must be in [0, 256), got {list(value)}")
        block = bytes(value)
    else:
        raise TypeError(f"unsupported block type: {type(value).__name__}")

    if len(block) != BLOCK_SIZE:
        raise ValueError(f"block must be {BLOCK_SIZE} bytes, got {len(block)}")
    return block


def decode(block: bytes) -> State:
    """Unpack a 4-byte block into lanes (b0, b1, b2, b3)."""
    b0, b1, b2, b3 = block
    return (b0, b1, b2, b3)


def encode(state: State) -> bytes:
    """Pack lanes (b0, b1, b2, b3) back into a 4-byte block."""
    return bytes(state)


def block_to_ip(block: BlockLike) -> str:
    """Render a block as a dotted-quad IPv4 string.

    Example:
        >>> block_to_ip(b"\\x01\\x02\\x03\\x04")
        '1.2.3.4'
    """
    return str(ipaddress.IPv4Address(as_block(block)))
