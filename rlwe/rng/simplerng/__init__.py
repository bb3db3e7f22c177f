from .simplerng import SimpleRNG

__all__ = ["SimpleRNG"]
