import pickle
from collections import defaultdict
from typing import Sequence, Union

from rlwe import errors
from rlwe.rq import Rq


def _default_none():
    # use this instead of lambda: None in defaultdict so that instances stay picklable
    return None


class DataStruct:
    def __init__(self, data, **kwargs):
        self.data = data
        self.misc = defaultdict(_default_none)
        self.misc.update(kwargs)

    def clone(self):
        """Clone the data structure.

        Ring elements are immutable, so only the containers are copied.

        Returns:
            DataStruct or its subclasses: A new instance of the same class.
        """
        cls = self.__class__
        data = tuple(self.data) if isinstance(self.data, (list, tuple)) else self.data
        return cls(data, **self.misc)

    @classmethod
    def wrap(cls, another: "DataStruct", **kwargs):
        """Wrap another data structure into a new instance of the same class.
        Args:
            another (DataStruct): The data structure to wrap.
        Returns:
            DataStruct or its subclasses: A new instance of the same class with the same attributes as `another`.
        """
        return cls(another.data, **{**another.misc, **kwargs})

    def save(self, path: str):
        with open(path, "wb") as f:
            pickle.dump(self, f)

    @classmethod
    def load(cls, path: str):
        with open(path, "rb") as f:
            obj = pickle.load(f)
        if not isinstance(obj, cls):
            raise TypeError(f"{path} holds a {type(obj).__name__}, expected {cls.__name__}.")
        return obj

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self.data == other.data

    __hash__ = None

    def __repr__(self):
        return f"{self.__class__.__name__}(misc={dict(self.misc)})"

    def __str__(self):
        return self.__repr__()


# ================== #
#  Key Structures    #
# ================== #


class SecretKey(DataStruct):
    def __init__(self, data: Rq, **kwargs):
        if not isinstance(data, Rq):
            raise TypeError(f"Secret key data must be Rq, got {type(data)}.")
        super().__init__(data, **kwargs)

    @property
    def s(self) -> Rq:
        return self.data

    def __repr__(self):
        # never print key material
        return f"{self.__class__.__name__}(n={self.data.n}, q={self.data.q})"


class PublicKey(DataStruct):
    """The pair (a0, a1) with a0 = -(a1 * s + t * e)."""

    def __init__(self, data: Sequence[Rq], **kwargs):
        data = tuple(data)
        if len(data) != 2:
            raise errors.MalformedPublicKey(length=len(data))
        super().__init__(data, **kwargs)

    @property
    def a0(self) -> Rq:
        return self.data[0]

    @property
    def a1(self) -> Rq:
        return self.data[1]

    def __len__(self):
        return len(self.data)

    def __iter__(self):
        return iter(self.data)

    def __getitem__(self, index):
        return self.data[index]

    def __repr__(self):
        return f"{self.__class__.__name__}(n={self.a0.n}, q={self.a0.q})"


# ================== #
#  Cipher Structures #
# ================== #


class Ciphertext(DataStruct):
    """Ordered sequence [c0, c1, ..., ck] of ring elements.

    The ciphertext is a polynomial in the secret key: decryption evaluates
    sum(c_i * s^i). Its length is ``degree + 1`` and grows with every
    homomorphic multiplication.
    """

    def __init__(self, data: Sequence[Rq], **kwargs):
        data = tuple(data)
        if not data:
            raise errors.MalformedCiphertext(reason="a ciphertext holds at least one element")
        for c in data:
            if not isinstance(c, Rq):
                raise errors.MalformedCiphertext(
                    reason=f"elements must be Rq, got {type(c).__name__}"
                )
        super().__init__(data, **kwargs)

    @property
    def degree(self) -> int:
        return len(self.data) - 1

    @property
    def n(self) -> int:
        return self.data[0].n

    @property
    def q(self) -> int:
        return self.data[0].q

    def __len__(self):
        return len(self.data)

    def __iter__(self):
        return iter(self.data)

    def __getitem__(self, index):
        return self.data[index]

    def __add__(self, other: Union["Ciphertext", Sequence[Rq]]):
        from rlwe.engine import cc_add

        return cc_add(self, other)

    def __radd__(self, other: Sequence[Rq]):
        return self + other

    def __mul__(self, other: Union["Ciphertext", Sequence[Rq]]):
        from rlwe.engine import cc_mult

        return cc_mult(self, other)

    def __rmul__(self, other: Sequence[Rq]):
        return self * other

    def __repr__(self):
        return f"{self.__class__.__name__}(degree={self.degree}, n={self.n}, q={self.q})"
