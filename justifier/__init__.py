"""Justifier - fixed-width text justification."""

from .config import FormatOptions, JustifierConfig
from .justifier import InvalidTextError, Justifier, justify
from .layout import justify_chunk, justify_lines, split_chunks

__all__ = [
    'Justifier',
    'InvalidTextError',
    'justify',
    'JustifierConfig',
    'FormatOptions',
    'split_chunks',
    'justify_chunk',
    'justify_lines',
]
