"""IPCrypt cipher modules."""

from .ipcrypt import IPCrypt, decrypt, encrypt
from .key import KEY_SIZE, Key, key_setup
from .lanes import add8, pack_word, rotl8, sub8, u8, unpack_word, xor_lanes
from .rounds import bwd, fwd
from .state import BLOCK_SIZE, as_block, block_to_ip, decode, encode

__all__ = [
    "IPCrypt",
    "encrypt",
    "decrypt",
    "Key",
    "key_setup",
    "KEY_SIZE",
    "BLOCK_SIZE",
    "fwd",
    "bwd",
    "as_block",
    "block_to_ip",
    "decode",
    "encode",
    "u8",
    "rotl8",
    "add8",
    "sub8",
    "xor_lanes",
    "pack_word",
    "unpack_word",
]
