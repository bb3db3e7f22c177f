import dataclasses

import pytest
from loguru import logger

from rlwe import errors
from rlwe.config import Preset, RlweConfig
from rlwe.rng import RngType, SimpleRNG, SystemRNG
from rlwe.utils import MillerRabinPrimalityTest, is_ntt_friendly, is_power_of_2


@pytest.fixture()
def warnings_log():
    messages = []
    handler_id = logger.add(messages.append, level="WARNING", format="{message}")
    yield messages
    logger.remove(handler_id)


@pytest.mark.parametrize("preset", list(Preset))
def test_presets_are_ntt_friendly(preset, warnings_log):
    config = RlweConfig.from_preset(preset)
    assert is_power_of_2(config.n)
    assert is_ntt_friendly(config.q, config.n)
    assert MillerRabinPrimalityTest(config.t)
    assert config.t < config.q
    assert warnings_log == []


def test_from_preset_accepts_names_and_overrides():
    config = RlweConfig.from_preset("toy", n_jobs=2, seed=11)
    assert (config.n, config.q, config.t, config.std) == (8, 67108289, 37, 3.0)
    assert config.n_jobs == 2
    assert config.seed == 11


def test_config_is_frozen():
    config = RlweConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.n = 16


@pytest.mark.parametrize("n", [0, 3, 12, -8])
def test_n_must_be_a_power_of_two(n):
    with pytest.raises(errors.NotPowerOfTwo):
        RlweConfig(n=n)


@pytest.mark.parametrize(
    "kwargs",
    [{"q": 0}, {"q": 1}, {"t": 1}, {"std": -1.0}, {"n_jobs": 0}],
)
def test_invalid_parameters(kwargs):
    with pytest.raises(errors.InvalidParameter):
        RlweConfig(**kwargs)


def test_weak_parameters_are_logged(warnings_log):
    RlweConfig(n=8, q=1000, t=37)
    RlweConfig(n=8, q=67108289, t=36)
    RlweConfig(n=8, q=97, t=101)
    assert any("q=1000" in m for m in warnings_log)
    assert any("t=36 is not prime" in m for m in warnings_log)
    assert any("not smaller than q=97" in m for m in warnings_log)


def test_make_rng():
    rng = RlweConfig(seed=5).make_rng()
    assert isinstance(rng, SimpleRNG)
    assert rng.seed == 5
    assert isinstance(RlweConfig(rng_class=RngType.SYSTEM).make_rng(), SystemRNG)


@pytest.mark.parametrize(
    "number, expected",
    [
        (0, False),
        (1, False),
        (2, True),
        (37, True),
        (561, False),  # Carmichael number
        (67108289, True),
        (67108289 * 3, False),
        (1099511628161, True),
        (1125899906844161, True),
    ],
)
def test_miller_rabin(number, expected):
    assert MillerRabinPrimalityTest(number) is expected
