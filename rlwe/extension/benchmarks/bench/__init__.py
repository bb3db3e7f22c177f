import importlib
import pkgutil

from .registry import benchreg


def _scan_sub_modules():
    for sub_module_info in pkgutil.iter_modules(__path__):
        importlib.import_module(f"{__name__}.{sub_module_info.name}")


_scan_sub_modules()  # Import all submodules so that they can register themselves

__all__ = [
    "benchreg",
]
