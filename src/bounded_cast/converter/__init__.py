"""
Converter — clamp + линейный rescale между static и dynamic доменами.
"""

from .dispatch import (
    convert,
    convert_dynamic,
    convert_dynamic_to_static,
    convert_static,
    convert_static_to_dynamic,
)

__all__ = [
    "convert",
    "convert_static",
    "convert_dynamic",
    "convert_static_to_dynamic",
    "convert_dynamic_to_static",
]
