import os

import torch

from rlwe.rng.interface import RandNumGen

# Width of one torch int64 draw when building integers wider than int64.
_LIMB_BITS = 62
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


class SimpleRNG(RandNumGen):
    """Seedable generator backed by a ``torch.Generator``.

    Two instances built with the same seed replay the same stream, which is
    what the tests rely on. Integer ranges that do not fit in int64 are drawn
    from several int64 limbs with rejection, so any ``[low, high]`` works.
    """

    def __init__(self, seed=None, device="cpu"):
        self.device = device
        self.seed = (
            seed if seed is not None else int.from_bytes(os.urandom(8), "big") >> 1
        )
        self.generator = torch.Generator(device=device)
        self.generator.manual_seed(self.seed)

    def randint(self, low: int, high: int, size: int) -> list[int]:
        if _INT64_MIN <= low and high < _INT64_MAX and high - low < (1 << _LIMB_BITS):
            r = torch.randint(
                low=low,
                high=high + 1,
                size=(size,),
                generator=self.generator,
                device=self.device,
                dtype=torch.int64,
            )
            return r.tolist()
        return [low + x for x in self._randbelow(high - low + 1, size)]

    def _randbelow(self, span: int, size: int) -> list[int]:
        # Uniform on [0, span): concatenate limbs, keep the top bits, reject >= span.
        bits = span.bit_length()
        n_limbs = -(-bits // _LIMB_BITS)
        shift = n_limbs * _LIMB_BITS - bits
        out = []
        while len(out) < size:
            limbs = torch.randint(
                low=0,
                high=1 << _LIMB_BITS,
                size=(size - len(out), n_limbs),
                generator=self.generator,
                device=self.device,
                dtype=torch.int64,
            )
            for row in limbs.tolist():
                value = 0
                for limb in row:
                    value = (value << _LIMB_BITS) | limb
                value >>= shift
                if value < span:
                    out.append(value)
        return out

    def uniform(self, size: int) -> list[float]:
        r = torch.rand(
            (size,),
            generator=self.generator,
            device=self.device,
            dtype=torch.float64,
        )
        return r.tolist()

    def normal(self, std: float, size: int) -> list[float]:
        samples = torch.normal(
            mean=0.0,
            std=float(std),
            size=(size,),
            generator=self.generator,
            device=self.device,
            dtype=torch.float64,
        )
        return samples.tolist()

    def __repr__(self):
        return f"{self.__class__.__name__}(seed={self.seed}, device={self.device})"
