from vdtoys.registry import Registry

benchreg = Registry("benchmarks")
