class RlweError(ValueError):
    """Base class of every precondition failure raised by rlwe.

    Subclasses define ``msg`` as a format string, filled in from the keyword
    arguments given at raise time, e.g. ``NotPowerOfTwo(n=12)``.
    """

    msg = "Invalid RLWE operation."

    def __init__(self, **kwargs):
        self.kwargs = kwargs
        super().__init__(self.msg.format(**kwargs))


class InvalidRingElement(RlweError):
    msg = "Cannot build a ring element: {reason}."


class RingMismatch(RlweError):
    msg = (
        "Ring elements live in different rings: "
        "(n={n_left}, q={q_left}) vs (n={n_right}, q={q_right})."
    )


class NotPowerOfTwo(RlweError):
    msg = "Ring degree n must be a power of two, got n={n}."


class InvalidParameter(RlweError):
    msg = "Invalid parameter {name}={value}: {reason}."


class MalformedPublicKey(RlweError):
    msg = "A public key holds exactly two ring elements, got {length}."


class MalformedCiphertext(RlweError):
    msg = "Malformed ciphertext: {reason}."


class InvalidSamplerBounds(RlweError):
    msg = "Sampling bounds must satisfy min <= max, got [{low}, {high}]."
