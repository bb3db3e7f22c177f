import math


def is_power_of_2(n: int) -> bool:
    return isinstance(n, int) and n > 0 and (n & (n - 1)) == 0


def log2_headroom(noise: int, q: int) -> float:
    """Bits left between a noise magnitude and the decryption bound q/2."""
    if noise == 0:
        return math.log2(q / 2)
    return math.log2(q / 2) - math.log2(noise)
