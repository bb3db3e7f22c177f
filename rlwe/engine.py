import dataclasses
from typing import Sequence

from joblib import Parallel, delayed
from loguru import logger

from rlwe import errors
from rlwe.config import Preset, RlweConfig
from rlwe.rng import RandNumGen, RngType
from rlwe.rq import Rq
from rlwe.sampler import discrete_gaussian, discrete_uniform
from rlwe.typing import Ciphertext, PublicKey, SecretKey

CiphertextLike = Ciphertext | Sequence[Rq]

# -------------------------------------------------------------------------------------------
# Homomorphic operations.
# These only touch ring elements, so they do not need an engine instance.
# -------------------------------------------------------------------------------------------


def _as_ciphertext(ct: CiphertextLike) -> Ciphertext:
    return ct if isinstance(ct, Ciphertext) else Ciphertext(ct)


def _pad(elements, length: int, zero: Rq) -> list[Rq]:
    return list(elements) + [zero] * (length - len(elements))


def cc_add(ct0: CiphertextLike, ct1: CiphertextLike) -> Ciphertext:
    """Termwise sum, the shorter ciphertext padded with zero elements."""
    ct0, ct1 = _as_ciphertext(ct0), _as_ciphertext(ct1)
    length = max(len(ct0), len(ct1))
    zero = Rq.zero(ct0.n, ct0.q)
    a = _pad(ct0, length, zero)
    b = _pad(ct1, length, zero)
    return Ciphertext([x + y for x, y in zip(a, b)])


def _convolve_index(a: list[Rq], b: list[Rq], i: int) -> Rq:
    acc = a[0] * b[i]
    for j in range(1, i + 1):
        acc = acc + a[j] * b[i - j]
    return acc


def cc_mult(ct0: CiphertextLike, ct1: CiphertextLike, n_jobs: int = 1) -> Ciphertext:
    """Product of two ciphertexts seen as polynomials in the secret key.

    With k0 and k1 the degrees of the operands, ``ct0`` is padded with k1 zero
    elements and ``ct1`` with k0, then output index i is the sum of
    ``ct0[j] * ct1[i - j]`` for j <= i. The result has degree k0 + k1.

    Output indices are independent of each other; when ``n_jobs`` is not 1 they
    are computed on a joblib thread pool, giving the same result.
    """
    ct0, ct1 = _as_ciphertext(ct0), _as_ciphertext(ct1)
    k0, k1 = ct0.degree, ct1.degree
    zero = Rq.zero(ct0.n, ct0.q)
    a = _pad(ct0, k0 + k1 + 1, zero)
    b = _pad(ct1, k0 + k1 + 1, zero)

    if n_jobs == 1:
        terms = [_convolve_index(a, b, i) for i in range(k0 + k1 + 1)]
    else:
        terms = Parallel(n_jobs=n_jobs, prefer="threads")(
            delayed(_convolve_index)(a, b, i) for i in range(k0 + k1 + 1)
        )
    return Ciphertext(terms)


# -------------------------------------------------------------------------------------------
# Engine.
# -------------------------------------------------------------------------------------------


class RLWE:
    """RLWE public-key scheme with homomorphic addition and multiplication.

    Parameters are fixed for the lifetime of the engine. All operations are
    pure functions of their arguments and of the engine's generator.

    Example:
        >>> engine = RLWE.from_preset("toy", seed=0)
        >>> sk, pk = engine.generate_keys()
        >>> m = engine.encode([1, 2, 3])
        >>> engine.decrypt(engine.encrypt(m, pk), sk) == m
        True
    """

    def __init__(
        self,
        n: int,
        q: int,
        t: int,
        std: float,
        *,
        rng: RandNumGen | None = None,
        rng_class: RngType = RngType.SIMPLE,
        seed: int | None = None,
        n_jobs: int = 1,
    ):
        self.config = RlweConfig(
            n=n,
            q=q,
            t=t,
            std=std,
            rng_class=rng_class,
            seed=seed,
            n_jobs=n_jobs,
        )
        self.rng = rng or self.config.make_rng()

    @classmethod
    def from_config(cls, config: RlweConfig, rng: RandNumGen | None = None):
        return cls(**dataclasses.asdict(config), rng=rng)

    @classmethod
    def from_preset(cls, preset: Preset | str, rng: RandNumGen | None = None, **kwargs):
        return cls.from_config(RlweConfig.from_preset(preset, **kwargs), rng=rng)

    @property
    def n(self) -> int:
        return self.config.n

    @property
    def q(self) -> int:
        return self.config.q

    @property
    def t(self) -> int:
        return self.config.t

    @property
    def std(self) -> float:
        return self.config.std

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(n={self.n}, q={self.q}, t={self.t}, "
            f"std={self.std}, rng={self.rng})"
        )

    # -------------------------------------------------------------------------------------------
    # Keys.
    # -------------------------------------------------------------------------------------------

    def generate_keys(self) -> tuple[SecretKey, PublicKey]:
        s = discrete_gaussian(self.n, self.q, self.std, rng=self.rng)
        e = discrete_gaussian(self.n, self.q, self.std, rng=self.rng)
        a1 = discrete_uniform(self.n, self.q, rng=self.rng)
        a0 = -(a1 * s + e * self.t)
        logger.debug(f"Generated key pair for n={self.n}, q={self.q}")
        return SecretKey(s), PublicKey((a0, a1))

    # -------------------------------------------------------------------------------------------
    # Encryption and decryption.
    # -------------------------------------------------------------------------------------------

    def encode(self, coeffs: Sequence[int]) -> Rq:
        """Plaintext ring element mod t from up to n coefficients, zero padded."""
        coeffs = [int(c) for c in coeffs]
        if len(coeffs) > self.n:
            raise errors.InvalidRingElement(
                reason=f"{len(coeffs)} coefficients do not fit in ring degree {self.n}"
            )
        return Rq(coeffs + [0] * (self.n - len(coeffs)), self.t)

    def encrypt(self, m: Rq | Sequence[int], pk: PublicKey | Sequence[Rq]) -> Ciphertext:
        if not isinstance(pk, PublicKey):
            pk = PublicKey(pk)
        if not isinstance(m, Rq):
            m = self.encode(m)
        m = m.lift(self.q)

        e0 = discrete_gaussian(self.n, self.q, self.std, rng=self.rng)
        e1 = discrete_gaussian(self.n, self.q, self.std, rng=self.rng)
        e2 = discrete_gaussian(self.n, self.q, self.std, rng=self.rng)

        c0 = m + pk.a0 * e0 + e2 * self.t
        c1 = pk.a1 * e0 + e1 * self.t
        logger.debug(f"Encrypted plaintext into degree 1 ciphertext, n={self.n}, q={self.q}")
        return Ciphertext((c0, c1))

    def _evaluate(self, ct: CiphertextLike, sk: SecretKey | Rq) -> Rq:
        # sum(c_i * s^i) over Z_q
        ct = _as_ciphertext(ct)
        s = sk.s if isinstance(sk, SecretKey) else sk
        acc = ct[0]
        s_power = s
        for i in range(1, len(ct)):
            acc = acc + ct[i] * s_power
            if i < ct.degree:
                s_power = s_power * s
        return acc

    def decrypt(self, ct: CiphertextLike, sk: SecretKey | Rq) -> Rq:
        return self._evaluate(ct, sk).lift(self.t)

    def noise(self, ct: CiphertextLike, sk: SecretKey | Rq) -> int:
        """Largest coefficient of sum(c_i * s^i) before the projection mod t.

        Decryption stays correct while this is below q/2.
        """
        return self._evaluate(ct, sk).inf_norm()

    # -------------------------------------------------------------------------------------------
    # Homomorphic operations.
    # -------------------------------------------------------------------------------------------

    def add(self, ct0: CiphertextLike, ct1: CiphertextLike) -> Ciphertext:
        return cc_add(ct0, ct1)

    def mul(self, ct0: CiphertextLike, ct1: CiphertextLike) -> Ciphertext:
        ct = cc_mult(ct0, ct1, n_jobs=self.config.n_jobs)
        logger.debug(f"Multiplied ciphertexts into degree {ct.degree}")
        return ct
