from rlwe import errors
from rlwe.rng import RandNumGen
from rlwe.rq import Rq


def discrete_gaussian(n: int, q: int, std: float, rng: RandNumGen) -> Rq:
    """
    Sample a ring element with rounded zero-mean normal coefficients.

    Args:
        n (int): Number of coefficients.
        q (int): Modulus of the resulting element.
        std (float): Standard deviation of the normal distribution.
        rng (RandNumGen): Randomness source.

    Returns:
        Rq: Element of length n, coefficients centered mod q.
    """
    samples = rng.normal(std, n)
    return Rq([int(round(x)) for x in samples], q)


def discrete_uniform(
    n: int,
    q: int,
    low: int = 0,
    high: int | None = None,
    *,
    rng: RandNumGen,
) -> Rq:
    """
    Sample a ring element with coefficients uniform on [low, high].

    Args:
        n (int): Number of coefficients.
        q (int): Modulus of the resulting element.
        low (int): Smallest coefficient that can be drawn.
        high (int | None): Largest coefficient that can be drawn, q if None.
        rng (RandNumGen): Randomness source.

    Returns:
        Rq: Element of length n, coefficients centered mod q.
    """
    high = q if high is None else high
    if high < low:
        raise errors.InvalidSamplerBounds(low=low, high=high)
    return Rq(rng.randint(low, high, n), q)
