"""Byte-lane primitives for the IPCrypt rounds.

Every operation here is confined to a single 8-bit lane. Values are plain
Python ints and results are always masked back into [0, 256), so a carry
out of one lane can never leak into its neighbour.
"""

U8_MASK = 0xFF
U32_MASK = 0xFFFFFFFF


def u8(x: int) -> int:
    """Force integer into unsigned 8-bit domain.

    Args:
        x: Input integer (can be negative or any size)

    Returns:
        Unsigned 8-bit integer (value modulo 2^8)
    """
    return x & U8_MASK


def rotl8(x: int, r: int) -> int:
    """Rotate an 8-bit lane left by r bits.

    Rotating by r and then by 8 - r is the identity, which is how the
    backward round undoes the forward rotations.

    Args:
        x: Lane value in [0, 256)
        r: Rotation amount in [0, 8)

    Returns:
        Rotated lane value in [0, 256)

    Example:
        >>> rotl8(0x71, 4)
        23
    """
    x = u8(x)
    r &= 7
    return u8((x << r) | (x >> (8 - r)))


def add8(a: int, b: int) -> int:
    """Lane addition modulo 256."""
    return u8(a + b)


def sub8(a: int, b: int) -> int:
    """Lane subtraction modulo 256."""
    return u8(a - b)


def xor_lanes(
    state: tuple[int, int, int, int], lanes: tuple[int, int, int, int]
) -> tuple[int, int, int, int]:
    """Xor a 4-lane state with 4 key lanes, lane by lane.

    Args:
        state: Working state (b0, b1, b2, b3)
        lanes: Lanes of one key word, same order as the state

    Returns:
        New state with lane i equal to state[i] ^ lanes[i]
    """
    s0, s1, s2, s3 = state
    k0, k1, k2, k3 = lanes
    return (s0 ^ k0, s1 ^ k1, s2 ^ k2, s3 ^ k3)


def pack_word(lanes: tuple[int, int, int, int]) -> int:
    """Pack 4 lanes into a 32-bit word, lane 0 least significant.

    Args:
        lanes: Four lane values in [0, 256)

    Returns:
        Unsigned 32-bit word
    """
    b0, b1, b2, b3 = (u8(b) for b in lanes)
    return (b3 << 24) | (b2 << 16) | (b1 << 8) | b0


def unpack_word(word: int) -> tuple[int, int, int, int]:
    """Split a 32-bit word into 4 lanes, lane 0 least significant.

    Args:
        word: Input word (masked to 32 bits)

    Returns:
        (b0, b1, b2, b3) lane tuple
    """
    word &= U32_MASK
    return (u8(word), u8(word >> 8), u8(word >> 16), u8(word >> 24))
