import pytest

from rlwe import errors
from rlwe.rng import RandNumGen, SimpleRNG, SystemRNG
from rlwe.rq import Rq
from rlwe.sampler import discrete_gaussian, discrete_uniform

Q = 67108289


class ConstantRNG(RandNumGen):
    def randint(self, low, high, size):
        return [high] * size

    def uniform(self, size):
        return [0.5] * size

    def normal(self, std, size):
        return [1.6 * std] * size


def test_discrete_gaussian_shape_and_width():
    e = discrete_gaussian(64, Q, 3.0, rng=SimpleRNG(seed=1))
    assert isinstance(e, Rq)
    assert e.n == 64
    assert e.q == Q
    # 10 standard deviations
    assert e.inf_norm() <= 30
    assert any(c != 0 for c in e.coeffs)


def test_discrete_gaussian_rounds_to_nearest():
    e = discrete_gaussian(4, Q, 1.0, rng=ConstantRNG())
    assert e.coeffs == (2, 2, 2, 2)


def test_discrete_gaussian_is_reduced_mod_q():
    e = discrete_gaussian(256, 5, 40.0, rng=SimpleRNG(seed=2))
    assert all(-2 <= c <= 2 for c in e.coeffs)


@pytest.mark.parametrize("seed", [0, 42])
def test_seeded_sampling_is_deterministic(seed):
    a = discrete_uniform(32, Q, rng=SimpleRNG(seed=seed))
    b = discrete_uniform(32, Q, rng=SimpleRNG(seed=seed))
    assert a == b
    c = discrete_gaussian(32, Q, 3.2, rng=SimpleRNG(seed=seed))
    d = discrete_gaussian(32, Q, 3.2, rng=SimpleRNG(seed=seed))
    assert c == d


def test_different_seeds_differ():
    a = discrete_uniform(32, Q, rng=SimpleRNG(seed=0))
    b = discrete_uniform(32, Q, rng=SimpleRNG(seed=1))
    assert a != b


def test_discrete_uniform_bounds():
    e = discrete_uniform(256, Q, low=-2, high=2, rng=SimpleRNG(seed=5))
    assert set(e.coeffs) == {-2, -1, 0, 1, 2}


def test_discrete_uniform_default_bounds_are_centered():
    e = discrete_uniform(256, 17, rng=SimpleRNG(seed=5))
    assert all(-8 <= c <= 8 for c in e.coeffs)
    # the default upper bound q is inclusive and reduces to 0
    assert discrete_uniform(3, 17, rng=ConstantRNG()).coeffs == (0, 0, 0)


def test_discrete_uniform_rejects_empty_range():
    with pytest.raises(errors.InvalidSamplerBounds):
        discrete_uniform(8, Q, low=5, high=4, rng=SimpleRNG(seed=0))


def test_sampling_requires_a_generator():
    with pytest.raises(TypeError):
        discrete_uniform(16, Q)
    with pytest.raises(TypeError):
        discrete_gaussian(16, Q, 3.2)


def test_system_rng():
    rng = SystemRNG()
    e = discrete_uniform(64, Q, low=0, high=3, rng=rng)
    assert all(0 <= c <= 3 for c in e.coeffs)
    assert all(0.0 <= x < 1.0 for x in rng.uniform(16))
    assert discrete_gaussian(8, Q, 0.0, rng=rng) == Rq.zero(8, Q)


def test_simple_rng_uniform():
    values = SimpleRNG(seed=9).uniform(100)
    assert len(values) == 100
    assert all(0.0 <= x < 1.0 for x in values)


WIDE_Q = 18446744073709551697  # prime above 2^64, = 1 (mod 16)


def test_simple_rng_draws_beyond_int64():
    rng = SimpleRNG(seed=11)
    values = rng.randint(0, WIDE_Q, 256)
    assert all(0 <= v <= WIDE_Q for v in values)
    # a uniform draw over 2^64 values lands above int64 about half the time
    assert any(v >= 1 << 63 for v in values)
    assert values == SimpleRNG(seed=11).randint(0, WIDE_Q, 256)


@pytest.mark.parametrize(
    "low, high",
    [(-(1 << 70), -(1 << 70) + 4), (1 << 80, (1 << 80) + 2), (-(1 << 66), 1 << 66)],
)
def test_simple_rng_wide_bounds_are_inclusive(low, high):
    values = SimpleRNG(seed=4).randint(low, high, 200)
    assert all(low <= v <= high for v in values)
    if high - low < 8:
        assert set(values) == set(range(low, high + 1))


def test_discrete_uniform_with_wide_modulus():
    e = discrete_uniform(64, WIDE_Q, rng=SimpleRNG(seed=12))
    assert e.q == WIDE_Q
    assert all(-(WIDE_Q // 2) <= c <= WIDE_Q // 2 for c in e.coeffs)
    assert e.inf_norm() > 1 << 62


def test_simple_rng_normal_is_double_precision():
    # float32 cannot represent odd integers above 2^24
    samples = SimpleRNG(seed=6).normal(2.0**40, 64)
    assert any(round(x) % 2 == 1 for x in samples)
