from abc import ABC, abstractmethod


class RandNumGen(ABC):
    """Randomness capability consumed by the noise sampler.

    Implementations must make every draw independent of the previous ones;
    callers never rely on a cross-call ordering.
    """

    @abstractmethod
    def randint(self, low: int, high: int, size: int) -> list[int]:
        """
        Draw uniform integers.

        Args:
            low (int): Smallest value that can be drawn.
            high (int): Largest value that can be drawn (inclusive).
            size (int): Number of draws.

        Returns:
            list[int]: ``size`` integers in [low, high].
        """
        pass

    @abstractmethod
    def uniform(self, size: int) -> list[float]:
        """
        Draw uniform reals.

        Args:
            size (int): Number of draws.

        Returns:
            list[float]: ``size`` floats in [0, 1).
        """
        pass

    @abstractmethod
    def normal(self, std: float, size: int) -> list[float]:
        """
        Draw zero-mean normal reals.

        Args:
            std (float): Standard deviation.
            size (int): Number of draws.

        Returns:
            list[float]: ``size`` floats.
        """
        pass
