import random

# Fixed witnesses make the test deterministic for every number below 3.3 * 10^24.
_DETERMINISTIC_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)
_DETERMINISTIC_LIMIT = 3317044064679887385961981


def MillerRabinPrimalityTest(number: int, rounds: int = 10) -> bool:
    if number < 2:
        return False
    for p in _DETERMINISTIC_WITNESSES:
        if number == p:
            return True
        if number % p == 0:
            return False

    # Express number - 1 as 2^s * r with r odd.
    odd_part = number - 1
    times_two_divides = 0
    while odd_part % 2 == 0:
        odd_part //= 2
        times_two_divides += 1

    if number < _DETERMINISTIC_LIMIT:
        witnesses = _DETERMINISTIC_WITNESSES
    else:
        witnesses = [random.randrange(2, number - 1) for _ in range(rounds)]

    for witness in witnesses:
        x = pow(witness, odd_part, number)
        if x == 1 or x == number - 1:
            continue
        for _ in range(times_two_divides - 1):
            x = pow(x, 2, number)
            if x == number - 1:
                break
        else:
            # No square root of -1 on the way: witness of compositeness.
            return False

    # Probably prime, certainly so below the deterministic limit.
    return True


def is_ntt_friendly(q: int, n: int) -> bool:
    """True when q is prime and q = 1 (mod 2n)."""
    return q % (2 * n) == 1 and MillerRabinPrimalityTest(q)
