from enum import Enum

from .interface import RandNumGen
from .simplerng import SimpleRNG
from .systemrng import SystemRNG


class RngType(Enum):
    SIMPLE = "SimpleRNG"
    SYSTEM = "SystemRNG"


__all__ = [
    "RandNumGen",
    "RngType",
    "SimpleRNG",
    "SystemRNG",
]
