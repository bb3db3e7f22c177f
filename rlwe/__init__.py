from importlib.metadata import version

from rlwe.config import Preset, RlweConfig
from rlwe.engine import RLWE
from rlwe.rng import RngType, SimpleRNG, SystemRNG
from rlwe.rq import Rq, crange, polydiv
from rlwe.sampler import discrete_gaussian, discrete_uniform
from rlwe.typing import Ciphertext, PublicKey, SecretKey

__version__ = version("rlwe")

__all__ = [
    "RLWE",
    "Preset",
    "RlweConfig",
    "Rq",
    "crange",
    "polydiv",
    "discrete_gaussian",
    "discrete_uniform",
    "RngType",
    "SimpleRNG",
    "SystemRNG",
    "Ciphertext",
    "PublicKey",
    "SecretKey",
]
