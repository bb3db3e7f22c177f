import pytest

from rlwe import RLWE, errors
from rlwe.rq import Rq
from rlwe.typing import Ciphertext, PublicKey, SecretKey


@pytest.fixture()
def engine():
    return RLWE.from_preset("toy", seed=31)


def test_save_and_load(engine, tmp_path):
    sk, pk = engine.generate_keys()
    m = engine.encode([4, 0, 1])
    ct = engine.encrypt(m, pk)

    sk.save(tmp_path / "sk.pkl")
    pk.save(tmp_path / "pk.pkl")
    ct.save(tmp_path / "ct.pkl")

    sk_loaded = SecretKey.load(tmp_path / "sk.pkl")
    pk_loaded = PublicKey.load(tmp_path / "pk.pkl")
    ct_loaded = Ciphertext.load(tmp_path / "ct.pkl")
    assert sk_loaded == sk
    assert pk_loaded == pk
    assert ct_loaded == ct
    assert engine.decrypt(engine.encrypt(m, pk_loaded), sk_loaded) == m
    assert engine.decrypt(ct_loaded, sk_loaded) == m


def test_load_checks_the_type(engine, tmp_path):
    sk, _ = engine.generate_keys()
    sk.save(tmp_path / "sk.pkl")
    with pytest.raises(TypeError):
        Ciphertext.load(tmp_path / "sk.pkl")


def test_ciphertext_validation():
    with pytest.raises(errors.MalformedCiphertext):
        Ciphertext([])
    with pytest.raises(errors.MalformedCiphertext):
        Ciphertext([1, 2])


def test_ciphertext_metadata():
    ct = Ciphertext([Rq.zero(4, 97)] * 3, origin="test")
    assert ct.degree == 2
    assert len(ct) == 3
    assert (ct.n, ct.q) == (4, 97)
    assert ct.misc["origin"] == "test"
    assert ct.misc["missing"] is None
    assert repr(ct) == "Ciphertext(degree=2, n=4, q=97)"


def test_clone_and_wrap():
    ct = Ciphertext([Rq.one(4, 97), Rq.zero(4, 97)], origin="test")
    clone = ct.clone()
    assert clone == ct
    assert clone is not ct
    assert clone.misc["origin"] == "test"
    wrapped = Ciphertext.wrap(ct, origin="wrapped")
    assert wrapped == ct
    assert wrapped.misc["origin"] == "wrapped"


def test_public_key_holds_a_pair():
    a = Rq.one(4, 97)
    with pytest.raises(errors.MalformedPublicKey):
        PublicKey([a])
    pk = PublicKey([a, -a])
    a0, a1 = pk
    assert (a0, a1) == (pk.a0, pk.a1) == (pk[0], pk[1])


def test_secret_key_repr_hides_key_material():
    sk = SecretKey(Rq([5, -7, 3, 1], 97))
    assert repr(sk) == "SecretKey(n=4, q=97)"
    with pytest.raises(TypeError):
        SecretKey([5, -7, 3, 1])
