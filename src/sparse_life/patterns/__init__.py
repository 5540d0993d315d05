"""Seed patterns and shape analysis (still lifes, oscillators, spaceships)."""

from .seeds import (
    DEFAULT_SEED, GLIDER, BLINKER, BLOCK, NAMED_PATTERNS,
    get_pattern, translate, cells_from_array, cells_from_strings
)
from .shapes import PatternPeriod, normalize, translation_between, find_period, classify

__all__ = [
    'DEFAULT_SEED',
    'GLIDER',
    'BLINKER',
    'BLOCK',
    'NAMED_PATTERNS',
    'get_pattern',
    'translate',
    'cells_from_array',
    'cells_from_strings',
    'PatternPeriod',
    'normalize',
    'translation_between',
    'find_period',
    'classify',
]
