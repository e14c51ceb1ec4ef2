"""Justify text to a fixed width.

The ``Justifier`` keeps its separators for its whole life and remembers the
last valid width and gap limit it was called with. ``justify`` is the
stateless shortcut for one-off calls.
"""

import logging
from typing import Any, Optional

from .config import FormatOptions, JustifierConfig, is_valid_max_space, is_valid_width
from .constants import JustifierConstants
from .layout import justify_paragraph

logger = logging.getLogger(__name__)


class InvalidTextError(TypeError):
    """Exception raised when the text to justify is not a string."""


class Justifier:
    """Justifies paragraphs of text so both edges line up."""

    def __init__(self, line_separator: Optional[str] = None,
                 word_break: Optional[str] = None,
                 paragraph_separator: Optional[str] = None):
        """Initialize the justifier.

        Args:
            line_separator: String placed between output lines (default: os.linesep).
            word_break: Marker appended to a word split across lines (default: "-").
            paragraph_separator: String separating paragraphs on input and output
                (default: os.linesep twice). An empty string treats the whole
                input as one paragraph.
        """
        self._config = JustifierConfig.create(line_separator, word_break, paragraph_separator)
        self._options = FormatOptions()

    @property
    def config(self) -> JustifierConfig:
        return self._config

    @property
    def options(self) -> FormatOptions:
        """Width and gap limit used by the most recent call."""
        return self._options

    @property
    def width(self) -> int:
        return self._options.width

    @property
    def max_space(self) -> int:
        return self._options.max_space

    def __call__(self, text: str, width: Any = JustifierConstants.DEFAULT_WIDTH,
                 max_space: Any = JustifierConstants.DEFAULT_MAX_SPACE) -> str:
        """Same as format()."""
        return self.format(text, width, max_space)

    def format(self, text: str, width: Any = JustifierConstants.DEFAULT_WIDTH,
               max_space: Any = JustifierConstants.DEFAULT_MAX_SPACE) -> str:
        """Justify a body of text.

        Args:
            text: Text to justify.
            width: Line width in characters. Anything but a positive int is
                ignored and the previous width is used.
            max_space: Largest average gap allowed before a word is split
                instead; 0 disables the limit. Anything but a non-negative
                int is ignored and the previous value is used.

        Returns:
            The justified text.

        Raises:
            InvalidTextError: If text is not a string.
        """
        if not isinstance(text, str):
            raise InvalidTextError(f"text must be a string, not {type(text).__name__}")

        if not is_valid_width(width):
            logger.debug(f"Ignoring width {width!r}, keeping {self._options.width}")
        if not is_valid_max_space(max_space):
            logger.debug(f"Ignoring max_space {max_space!r}, keeping {self._options.max_space}")
        self._options = self._options.merged(width, max_space)

        return self._justify_text(text)

    def _justify_text(self, text: str) -> str:
        """Split text into paragraphs, justify each and join them back."""
        if not self._config.splits_paragraphs:
            return self._justify_paragraph(text)

        separator = self._config.paragraph_separator
        paragraphs = text.split(separator)
        return separator.join(self._justify_paragraph(p) for p in paragraphs)

    def _justify_paragraph(self, paragraph: str) -> str:
        return justify_paragraph(
            paragraph,
            self._options.width,
            self._options.max_space,
            word_break=self._config.word_break,
            line_separator=self._config.line_separator,
        )


def justify(text: str, width: Any = JustifierConstants.DEFAULT_WIDTH,
            max_space: Any = JustifierConstants.DEFAULT_MAX_SPACE,
            line_separator: Optional[str] = None,
            word_break: Optional[str] = None,
            paragraph_separator: Optional[str] = None) -> str:
    """Justify text with a fresh Justifier.

    Nothing is remembered between calls, so invalid width or max_space
    values fall back to the defaults rather than to an earlier call.
    """
    justifier = Justifier(line_separator, word_break, paragraph_separator)
    return justifier.format(text, width, max_space)
