from .generate_primes import MillerRabinPrimalityTest, is_ntt_friendly
from .massive import is_power_of_2, log2_headroom

__all__ = [
    "MillerRabinPrimalityTest",
    "is_ntt_friendly",
    "is_power_of_2",
    "log2_headroom",
]
