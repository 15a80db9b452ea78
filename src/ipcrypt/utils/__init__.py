"""Utilities module for ipcrypt."""

from ipcrypt.utils.device import resolve_device
from ipcrypt.utils.logging import get_logger
from ipcrypt.utils.profiling import Timer, blocks_per_second, timer
from ipcrypt.utils.seeds import seed_everything

__all__ = [
    "get_logger",
    "resolve_device",
    "seed_everything",
    "timer",
    "Timer",
    "blocks_per_second",
]
