import random

from rlwe.rng.interface import RandNumGen


class SystemRNG(RandNumGen):
    """Generator drawing from the operating system's entropy pool.

    Not seedable. Integer bounds may be arbitrarily large.
    """

    def __init__(self):
        self._random = random.SystemRandom()

    def randint(self, low: int, high: int, size: int) -> list[int]:
        return [self._random.randint(low, high) for _ in range(size)]

    def uniform(self, size: int) -> list[float]:
        return [self._random.random() for _ in range(size)]

    def normal(self, std: float, size: int) -> list[float]:
        return [self._random.gauss(0.0, std) for _ in range(size)]

    def __repr__(self):
        return f"{self.__class__.__name__}()"
