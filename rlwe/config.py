from dataclasses import dataclass
from enum import Enum

from loguru import logger

from rlwe import errors
from rlwe.rng import RandNumGen, RngType, SimpleRNG, SystemRNG
from rlwe.utils import MillerRabinPrimalityTest, is_ntt_friendly, is_power_of_2


class Preset(Enum):
    toy = "toy"
    small = "small"
    medium = "medium"


# Every q below is prime with q = 1 (mod 2n).
_PRESET_CONFIGS = {
    Preset.toy: {
        "n": 8,
        "q": 67108289,
        "t": 37,
        "std": 3.0,
    },
    Preset.small: {
        "n": 64,
        "q": 1099511628161,
        "t": 257,
        "std": 3.2,
    },
    Preset.medium: {
        "n": 256,
        "q": 1125899906844161,
        "t": 257,
        "std": 3.2,
    },
}


@dataclass(frozen=True)
class RlweConfig:
    n: int = 8  # Ring degree, f = x^n + 1.
    q: int = 67108289  # Ciphertext modulus.
    t: int = 37  # Plaintext modulus.
    std: float = 3.0  # Width of the discrete gaussian.
    rng_class: RngType = RngType.SIMPLE
    seed: int | None = None
    n_jobs: int = 1  # Threads used by ciphertext multiplication.

    @classmethod
    def from_preset(cls, preset: Preset | str, **kwargs):
        """
        Create a RlweConfig instance from a preset.
        Args:
            preset (Preset | str): The preset to use.
            **kwargs: Additional keyword arguments to override the preset values.
        Returns:
            RlweConfig: The RlweConfig instance with the preset values.
        """
        preset = Preset(preset)
        return cls(**{**_PRESET_CONFIGS[preset], **kwargs})

    def __post_init__(self):
        if not is_power_of_2(self.n):
            raise errors.NotPowerOfTwo(n=self.n)
        if self.q <= 1:
            raise errors.InvalidParameter(
                name="q", value=self.q, reason="the modulus must be greater than 1"
            )
        if self.t <= 1:
            raise errors.InvalidParameter(
                name="t", value=self.t, reason="the modulus must be greater than 1"
            )
        if self.std < 0:
            raise errors.InvalidParameter(
                name="std", value=self.std, reason="must be non-negative"
            )
        if self.n_jobs == 0:
            raise errors.InvalidParameter(
                name="n_jobs", value=self.n_jobs, reason="must be non-zero"
            )
        self._warn_weak_parameters()

    def _warn_weak_parameters(self):
        # These do not break the arithmetic, only the scheme's guarantees.
        if not is_ntt_friendly(self.q, self.n):
            logger.warning(
                f"q={self.q} is not a prime with q = 1 (mod 2n={2 * self.n})."
            )
        if self.t >= self.q:
            logger.warning(
                f"Plaintext modulus t={self.t} is not smaller than q={self.q}, "
                "decryption cannot be correct."
            )
        elif not MillerRabinPrimalityTest(self.t):
            logger.warning(f"Plaintext modulus t={self.t} is not prime.")

    def make_rng(self) -> RandNumGen:
        if self.rng_class == RngType.SIMPLE:
            return SimpleRNG(seed=self.seed)
        if self.seed is not None:
            logger.warning(f"{self.rng_class.value} is not seedable, ignoring seed.")
        return SystemRNG()
