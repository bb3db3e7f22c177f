import numbers

from rlwe import errors

# ------------------------------------------------------------------------------------------
# Coefficient helpers.
# ------------------------------------------------------------------------------------------


def crange(coeffs, q):
    """Centered reduction of integer coefficients modulo q.

    Every value is first reduced into the canonical range [0, q), values above
    q/2 are then shifted down by q, so the result lies in (-q/2, q/2].
    """
    half = q // 2
    centered = []
    for c in coeffs:
        c %= q
        if c > half:
            c -= q
        centered.append(c)
    return centered


def _trim(poly):
    # Drop leading zeros, keep at least the constant term.
    poly = list(poly)
    while len(poly) > 1 and poly[-1] == 0:
        poly.pop()
    return poly or [0]


def polymul(a, b):
    """Raw convolution of two coefficient lists, lowest degree first."""
    product = [0] * (len(a) + len(b) - 1)
    for i, ai in enumerate(a):
        if ai == 0:
            continue
        for j, bj in enumerate(b):
            product[i + j] += ai * bj
    return product


def polydiv(dividend, divisor):
    """Polynomial long division over the integers.

    Coefficient lists are ordered lowest degree first. The leading term of the
    running remainder is eliminated with the divisor's leading term until the
    remainder's degree drops below the divisor's.

    Args:
        dividend (list[int]): Coefficients of the dividend.
        divisor (list[int]): Coefficients of the divisor.

    Returns:
        tuple[list[int], list[int]]: ``(quotient, remainder)``, both trimmed of
        leading zeros. The zero polynomial is ``[0]``.

    Example:
        >>> polydiv([1, -2, 1], [-1, 1])  # (x^2 - 2x + 1) / (x - 1)
        ([-1, 1], [0])
        >>> polydiv([2], [1, 1])
        ([0], [2])
    """
    divisor = _trim(divisor)
    if not any(divisor):
        raise ValueError("Polynomial division by the zero polynomial.")

    remainder = _trim(dividend)
    deg_divisor = len(divisor) - 1
    lead = divisor[-1]
    quotient = [0] * max(len(remainder) - deg_divisor, 1)

    while len(remainder) - 1 >= deg_divisor and any(remainder):
        shift = len(remainder) - 1 - deg_divisor
        factor, rest = divmod(remainder[-1], lead)
        if rest:
            raise ValueError(
                f"Leading coefficient {lead} does not divide {remainder[-1]} exactly."
            )
        quotient[shift] = factor
        for i, d in enumerate(divisor):
            remainder[shift + i] -= factor * d
        remainder = _trim(remainder[:-1])

    return _trim(quotient), remainder


def _poly_to_string(coeffs):
    terms = []
    for power in reversed(range(len(coeffs))):
        c = coeffs[power]
        if c == 0:
            continue
        magnitude = abs(c)
        if power == 0:
            body = str(magnitude)
        else:
            var = "x" if power == 1 else f"x^{power}"
            body = var if magnitude == 1 else f"{magnitude}{var}"
        if not terms:
            terms.append(body if c > 0 else f"-{body}")
        else:
            terms.append(f"{'-' if c < 0 else '+'} {body}")
    return " ".join(terms) or "0"


# ------------------------------------------------------------------------------------------
# Ring element.
# ------------------------------------------------------------------------------------------


class Rq:
    """Element of the polynomial ring Z_q[x] / (x^n + 1).

    The ring degree n is the number of coefficients the element is built from,
    and the reduction polynomial f = x^n + 1 is derived from it. Coefficients
    are stored lowest degree first, always as centered representatives in
    (-q/2, q/2].

    Rq is an immutable value: every arithmetic operation returns a new element.
    Reduction modulo f only happens inside ring multiplication.

    Example:
        >>> x = Rq([0, 1], q=17)
        >>> (x * x).coeffs  # x^2 = -1 mod (x^2 + 1)
        (-1, 0)
    """

    __slots__ = ("_coeffs", "_q", "_f")
    # numpy scalars defer to Rq.__rmul__ instead of broadcasting over coefficients
    __array_ufunc__ = None

    def __init__(self, coeffs, q: int):
        coeffs = [int(c) for c in coeffs]
        if not coeffs:
            raise errors.InvalidRingElement(reason="the coefficient list is empty")
        if not isinstance(q, numbers.Integral) or isinstance(q, bool):
            raise errors.InvalidRingElement(
                reason=f"the modulus must be an integer, got {type(q).__name__}"
            )
        if q <= 0:
            raise errors.InvalidRingElement(
                reason=f"the modulus must be positive, got q={q}"
            )
        n = len(coeffs)
        self._q = int(q)
        self._f = (1,) + (0,) * (n - 1) + (1,)
        self._coeffs = tuple(crange(coeffs, self._q))

    @classmethod
    def zero(cls, n: int, q: int) -> "Rq":
        return cls([0] * n, q)

    @classmethod
    def one(cls, n: int, q: int) -> "Rq":
        return cls([1] + [0] * (n - 1), q)

    @property
    def coeffs(self) -> tuple[int, ...]:
        return self._coeffs

    @property
    def q(self) -> int:
        return self._q

    @property
    def n(self) -> int:
        return len(self._coeffs)

    @property
    def f(self) -> tuple[int, ...]:
        """Coefficients of the reduction polynomial x^n + 1, lowest degree first."""
        return self._f

    def lift(self, modulus: int) -> "Rq":
        """Reinterpret the same coefficient data modulo another modulus."""
        return Rq(self._coeffs, modulus)

    def inf_norm(self) -> int:
        return max(abs(c) for c in self._coeffs)

    def _check_same_ring(self, other: "Rq"):
        if self._q != other._q or self.n != other.n:
            raise errors.RingMismatch(
                n_left=self.n,
                q_left=self._q,
                n_right=other.n,
                q_right=other._q,
            )

    # -------------------------------------------------------------------------------------------
    # Arithmetic.
    # -------------------------------------------------------------------------------------------

    def __add__(self, other: "Rq") -> "Rq":
        if not isinstance(other, Rq):
            return NotImplemented
        self._check_same_ring(other)
        return Rq([a + b for a, b in zip(self._coeffs, other._coeffs)], self._q)

    def __sub__(self, other: "Rq") -> "Rq":
        if not isinstance(other, Rq):
            return NotImplemented
        self._check_same_ring(other)
        return Rq([a - b for a, b in zip(self._coeffs, other._coeffs)], self._q)

    def __neg__(self) -> "Rq":
        return Rq([-c for c in self._coeffs], self._q)

    def __mul__(self, other: "Rq | int") -> "Rq":
        if isinstance(other, Rq):
            self._check_same_ring(other)
            product = polymul(self._coeffs, other._coeffs)
            _, remainder = polydiv(product, self._f)
            remainder += [0] * (self.n - len(remainder))
            return Rq(remainder, self._q)
        if isinstance(other, numbers.Integral) and not isinstance(other, bool):
            other = int(other)
            return Rq([c * other for c in self._coeffs], self._q)
        return NotImplemented

    def __rmul__(self, other: int) -> "Rq":
        if isinstance(other, numbers.Integral) and not isinstance(other, bool):
            return self * other
        return NotImplemented

    def __pow__(self, power: int) -> "Rq":
        if power < 0:
            raise errors.InvalidParameter(
                name="power", value=power, reason="must be non-negative"
            )
        result = Rq.one(self.n, self._q)
        for _ in range(power):
            result = result * self
        return result

    # -------------------------------------------------------------------------------------------
    # Value semantics.
    # -------------------------------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Rq):
            return NotImplemented
        return self._q == other._q and self._coeffs == other._coeffs

    def __hash__(self):
        return hash((self._coeffs, self._q))

    def __len__(self):
        return len(self._coeffs)

    def __getitem__(self, index):
        return self._coeffs[index]

    def __getstate__(self):
        return {"coeffs": self._coeffs, "q": self._q}

    def __setstate__(self, state):
        Rq.__init__(self, state["coeffs"], state["q"])

    def __repr__(self):
        return f"{self.__class__.__name__}({list(self._coeffs)}, q={self._q})"

    def __str__(self):
        half = self._q // 2
        return (
            f"Rq: {_poly_to_string(self._coeffs)} (mod {self._q}), "
            f"reminder range: ({-half}, {half})"
        )
