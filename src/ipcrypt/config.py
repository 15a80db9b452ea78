"""Configuration loading utilities."""

import binascii
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from ipcrypt.cipher.ipcrypt import IPCrypt
from ipcrypt.utils.device import resolve_device
from ipcrypt.utils.logging import get_logger

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Read an ipcrypt YAML file into a mapping.

    An empty file yields ``{}``. Any other top-level value than a mapping
    is rejected, so a stray scalar or list never reaches ``CipherConfig``.

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML parsing fails
        ValueError: If the document is not a mapping
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    logger.debug("Loading config from %s", config_path)
    with open(config_path, "r") as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(
            f"config must be a mapping, got {type(config).__name__}: {config_path}"
        )

    return config


def _quoted(config: Dict[str, Any], name: str) -> str:
    """Fetch a key field that YAML must have kept as text.

    Unquoted values such as ``00010203...`` or ``0x10`` are read by YAML as
    ints, which would silently change the key.
    """
    value = config[name]
    if not isinstance(value, str):
        raise ValueError(
            f"{name} must be a quoted string, got {type(value).__name__} {value!r}"
        )
    return value


@dataclass(frozen=True)
class CipherConfig:
    """Configuration for an IPCrypt cipher.

    Attributes:
        key_material: Raw key bytes (padded or truncated to 16 by key setup)
        device: Device the tensor path runs on ("cpu", "cuda" or "cuda:N")
        log_level: Level name for the ipcrypt logger
    """

    key_material: bytes
    device: str = "cpu"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        """Validate parameters."""
        if not isinstance(self.key_material, bytes):
            raise ValueError("key_material must be bytes")
        if not isinstance(self.device, str) or self.device.split(":")[0] not in ("cpu", "cuda"):
            raise ValueError(f"device must be 'cpu' or 'cuda[:N]', got {self.device!r}")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {list(LOG_LEVELS)}, got {self.log_level}"
            )

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "CipherConfig":
        """Build a config from a parsed YAML mapping.

        Exactly one of ``key`` (utf-8 text) or ``key_hex`` must be present,
        and it must be a quoted YAML string.
        """
        has_key = "key" in config
        has_hex = "key_hex" in config
        if has_key == has_hex:
            raise ValueError("config must set exactly one of 'key' or 'key_hex'")

        if has_hex:
            try:
                key_material = binascii.unhexlify(_quoted(config, "key_hex").strip())
            except binascii.Error as exc:
                raise ValueError(f"key_hex is not valid hex: {exc}") from exc
        else:
            key_material = _quoted(config, "key").encode("utf-8")

        return cls(
            key_material=key_material,
            device=config.get("device", "cpu"),
            log_level=str(config.get("log_level", "INFO")).upper(),
        )

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "CipherConfig":
        """Load and validate a config from a YAML file."""
        return cls.from_dict(load_config(config_path))

    def build(self) -> IPCrypt:
        """Create the configured cipher and apply the log level.

        The tensor entry points of the returned cipher run on ``device``.

        Raises:
            RuntimeError: If CUDA is configured but not available
        """
        device = resolve_device(self.device)
        get_logger("ipcrypt", level=getattr(logging, self.log_level))
        return IPCrypt.from_material(self.key_material, device=device)
