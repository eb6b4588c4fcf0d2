"""
Utility functions for figcomposer
"""

from .helpers import (
    to_float_array,
    enum_options,
    font_family_options,
    COLOR_SWATCHES,
    MARKER_OPTIONS,
    SPECIAL_CHARACTERS,
)

__all__ = [
    'to_float_array',
    'enum_options',
    'font_family_options',
    'COLOR_SWATCHES',
    'MARKER_OPTIONS',
    'SPECIAL_CHARACTERS',
]
