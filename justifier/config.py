"""Configuration objects for the justifier.

``JustifierConfig`` holds the separators and markers chosen when a
justifier is built. ``FormatOptions`` holds the per-call width and gap
limit, and knows how to merge new values over the last valid ones.
"""

from dataclasses import dataclass, replace
from typing import Any, Optional

from .constants import JustifierConstants


def is_valid_width(value: Any) -> bool:
    """Return True if value can be used as a line width."""
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def is_valid_max_space(value: Any) -> bool:
    """Return True if value can be used as a gap limit (0 disables it)."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


@dataclass(frozen=True)
class JustifierConfig:
    """Separators and markers used when rendering justified text.
    
    Attributes:
        line_separator: Inserted between output lines of a paragraph
        word_break: Appended when a word is split across lines
        paragraph_separator: Splits input into paragraphs and joins them back;
            empty means the whole input is one paragraph
    """
    line_separator: str = JustifierConstants.DEFAULT_LINE_SEPARATOR
    word_break: str = JustifierConstants.DEFAULT_WORD_BREAK
    paragraph_separator: str = JustifierConstants.DEFAULT_PARAGRAPH_SEPARATOR
    
    @classmethod
    def create(cls, line_separator: Optional[str] = None,
               word_break: Optional[str] = None,
               paragraph_separator: Optional[str] = None) -> 'JustifierConfig':
        """Create a configuration, overriding only the values given as strings.
        
        Anything that is not a string (including None) keeps the default, so
        omitting the paragraph separator never disables paragraph splitting.
        An explicit empty string does.
        """
        overrides = {}
        if isinstance(line_separator, str):
            overrides['line_separator'] = line_separator
        if isinstance(word_break, str):
            overrides['word_break'] = word_break
        if isinstance(paragraph_separator, str):
            overrides['paragraph_separator'] = paragraph_separator
        return cls(**overrides)
    
    @property
    def splits_paragraphs(self) -> bool:
        """Whether input is split into paragraphs before justification."""
        return bool(self.paragraph_separator)


@dataclass(frozen=True)
class FormatOptions:
    """Width and gap limit for one justification run.
    
    Attributes:
        width: Target line length in characters
        max_space: Largest average gap accepted before a word is split
            instead; 0 accepts any gap
    """
    width: int = JustifierConstants.DEFAULT_WIDTH
    max_space: int = JustifierConstants.DEFAULT_MAX_SPACE
    
    def merged(self, width: Any = None, max_space: Any = None) -> 'FormatOptions':
        """Return options with the valid values applied.
        
        Invalid values are dropped and the current value is kept, which makes
        the last valid width and gap limit stick across calls.
        """
        changes = {}
        if is_valid_width(width):
            changes['width'] = width
        if is_valid_max_space(max_space):
            changes['max_space'] = max_space
        return replace(self, **changes) if changes else self
