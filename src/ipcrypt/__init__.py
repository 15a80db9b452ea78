"""IPCrypt: format-preserving encryption of IPv4 addresses."""

from .cipher import (
    IPCrypt,
    Key,
    as_block,
    block_to_ip,
    decrypt,
    encrypt,
    key_setup,
)
from .cipher.tensor import decrypt_tensor, encrypt_tensor
from .config import CipherConfig, load_config
from .utils import get_logger, seed_everything

__version__ = "0.1.0"

__all__ = [
    # Cipher
    "Key",
    "key_setup",
    "encrypt",
    "decrypt",
    "IPCrypt",
    # Batched
    "encrypt_tensor",
    "decrypt_tensor",
    # Blocks
    "as_block",
    "block_to_ip",
    # Config
    "CipherConfig",
    "load_config",
    # Utils
    "get_logger",
    "seed_everything",
]
