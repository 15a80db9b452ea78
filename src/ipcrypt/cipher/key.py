"""Key setup for IPCrypt.

A key is 16 bytes of material viewed as four 4-byte lane groups. Each group
whitens the state once per call, lane i against lane i.
"""

import logging
from dataclasses import dataclass, field
from typing import Union

from ipcrypt.cipher.lanes import U32_MASK, pack_word, unpack_word

KEY_SIZE = 16

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Key:
    """Expanded 128-bit IPCrypt key.

    Attributes:
        raw: Exactly 16 bytes of key material
        lanes: Four key words, each as a (b0, b1, b2, b3) lane tuple
    """

    raw: bytes
    lanes: tuple[tuple[int, int, int, int], ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate parameters."""
        if not isinstance(self.raw, bytes):
            raise TypeError(f"raw must be bytes, got {type(self.raw).__name__}")
        if len(self.raw) != KEY_SIZE:
            raise ValueError(
                f"raw must be exactly {KEY_SIZE} bytes, got {len(self.raw)}; "
                "use key_setup() for arbitrary key material"
            )

        lanes = tuple(
            tuple(self.raw[i : i + 4]) for i in range(0, KEY_SIZE, 4)
        )
        # Use object.__setattr__ because dataclass is frozen
        object.__setattr__(self, "lanes", lanes)

    @property
    def words(self) -> tuple[int, int, int, int]:
        """Key as four little-endian 32-bit words."""
        return tuple(pack_word(lanes) for lanes in self.lanes)

    @classmethod
    def from_words(cls, w0: int, w1: int, w2: int, w3: int) -> "Key":
        """Build a key from four 32-bit words.

        Args:
            w0, w1, w2, w3: Key words in [0, 2**32), lane 0 least significant

        Returns:
            Key whose ``words`` equal the inputs

        Example:
            >>> Key.from_words(*[0xFFFFFFFF] * 4).raw == b"\\xff" * 16
            True
        """
        raw = bytearray()
        for word in (w0, w1, w2, w3):
            if not (0 <= word <= U32_MASK):
                raise ValueError(f"key word must be uint32, got {word}")
            raw.extend(unpack_word(word))
        return cls(bytes(raw))


def key_setup(material: Union[bytes, bytearray, memoryview]) -> Key:
    """Turn arbitrary key material into a Key.

    The first 16 bytes are used. Shorter input is zero-padded on the right,
    longer input is truncated. Neither case is an error.

    Args:
        material: bytes, bytearray or memoryview of any length

    Returns:
        Key built from the (padded or truncated) material
    """
    if not isinstance(material, (bytes, bytearray, memoryview)):
        raise TypeError(
            f"key material must be bytes-like, got {type(material).__name__}"
        )

    material = bytes(material)
    if len(material) > KEY_SIZE:
        logger.debug(
            "Key material truncated from %d to %d bytes", len(material), KEY_SIZE
        )
    elif len(material) < KEY_SIZE:
        logger.debug(
            "Key material zero-padded from %d to %d bytes", len(material), KEY_SIZE
        )

    return Key(material[:KEY_SIZE].ljust(KEY_SIZE, b"\x00"))
