"""Constants and defaults for the justifier."""

import os


class JustifierConstants:
    """Central default values for justification."""
    
    # Format parameters
    DEFAULT_WIDTH = 32  # Target line length in characters
    DEFAULT_MAX_SPACE = 3  # Largest average gap before a word gets split; 0 disables
    
    # Separators and markers
    DEFAULT_LINE_SEPARATOR = os.linesep
    DEFAULT_PARAGRAPH_SEPARATOR = os.linesep * 2
    DEFAULT_WORD_BREAK = "-"  # Appended to the first half of a split word
    
    # Characters
    SPACE = " "
    TRIM_CHARACTERS = " \t\n\r\0\x0b"  # Stripped from paragraph and chunk ends
