"""Line breaking and space distribution for justified text.

Everything here is a pure function of its arguments. Lengths are counted in
characters (code points), so multi-byte text wraps the same as ASCII.
"""

import logging
import math
import re

from .constants import JustifierConstants

logger = logging.getLogger(__name__)

SPACE = JustifierConstants.SPACE
_TRIM = JustifierConstants.TRIM_CHARACTERS
_SPACE_RUN = re.compile(r"( )\1+")


def clean_paragraph(paragraph: str) -> str:
    """Trim the ends and collapse runs of spaces into a single space.

    Only the plain space is collapsed; tabs and newlines inside the
    paragraph are left alone. Trimming removes ASCII whitespace only, so a
    leading non-breaking space survives.
    """
    return _SPACE_RUN.sub(r"\1", paragraph.strip(_TRIM))


def gap_size(chunk: str, position: int, width: int) -> int:
    """Return the average gap a chunk would need to stretch to width.

    Args:
        chunk: Candidate line, already trimmed.
        position: Index of the space the candidate was broken at.
        width: Target line length.

    Returns:
        The number of spaces each gap would have to hold, rounded up. A
        chunk without gaps reports the distance from the break to width.
    """
    gaps = chunk.count(SPACE)
    if gaps == 0:
        return width - position
    return math.ceil((gaps + width - len(chunk)) / gaps)


def _force_break(remaining: str, width: int, word_break: str) -> tuple[str, str]:
    # Always consume at least one character so width 1 still terminates
    step = max(width - 1, 1)
    return remaining[:step] + word_break, remaining[step:]


def split_chunks(paragraph: str, width: int, max_space: int,
                 word_break: str = JustifierConstants.DEFAULT_WORD_BREAK) -> list[str]:
    """Cut a cleaned paragraph into line-sized chunks.

    Breaks greedily at the rightmost space that keeps the line within width.
    When there is no such space, or breaking there would leave gaps wider
    than max_space on average, the next word is split instead and
    word_break is appended to its first part.
    """
    chunks: list[str] = []
    remaining = paragraph.strip(_TRIM)

    while remaining:
        if len(remaining) <= width:
            chunks.append(remaining)
            break

        position = remaining.rfind(SPACE, 0, width + 1)
        if position == -1:
            logger.debug(f"No space within {width} characters, splitting word")
            chunk, remaining = _force_break(remaining, width, word_break)
            chunks.append(chunk)
            continue

        chunk = remaining[:position].strip(_TRIM)
        if max_space > 0:
            size = gap_size(chunk, position, width)
            if size > max_space:
                logger.debug(f"Gap size {size} exceeds {max_space}, splitting word")
                forced, remaining = _force_break(remaining, width, word_break)
                chunks.append(forced)
                continue

        chunks.append(chunk)
        remaining = remaining[position + 1:].strip(_TRIM)

    return chunks


def justify_chunk(chunk: str, width: int) -> str:
    """Spread the words of a chunk so that it fills width.

    Extra spaces go to the leftmost gaps first. Chunks that are already
    full width, and chunks holding a single word, come back unchanged.
    """
    if len(chunk) >= width:
        return chunk

    words = chunk.split(SPACE)
    gaps = len(words) - 1
    if gaps < 1:
        return chunk

    total_spaces = width - len(chunk.replace(SPACE, ""))
    normal_space, additional = divmod(total_spaces, gaps)

    parts: list[str] = []
    for i, word in enumerate(words[:-1]):
        parts.append(word)
        parts.append(SPACE * (normal_space + (1 if i < additional else 0)))
    parts.append(words[-1])
    return "".join(parts)


def pad_line(line: str, width: int) -> str:
    """Right-pad a line with spaces up to width; longer lines are kept whole."""
    return line.ljust(width, SPACE)


def justify_lines(paragraph: str, width: int, max_space: int,
                  word_break: str = JustifierConstants.DEFAULT_WORD_BREAK) -> list[str]:
    """Return the justified lines of a paragraph that needs wrapping.

    Every line but the last is justified; the last is padded to width.
    """
    chunks = split_chunks(paragraph, width, max_space, word_break)
    if not chunks:
        return []
    lines = [justify_chunk(chunk, width) for chunk in chunks[:-1]]
    lines.append(pad_line(chunks[-1], width))
    return lines


def justify_paragraph(paragraph: str, width: int, max_space: int,
                      word_break: str = JustifierConstants.DEFAULT_WORD_BREAK,
                      line_separator: str = JustifierConstants.DEFAULT_LINE_SEPARATOR) -> str:
    """Justify one paragraph of raw text.

    Paragraphs that fit on one line after cleaning are returned as they are,
    without padding.
    """
    paragraph = clean_paragraph(paragraph)
    if paragraph == "" or len(paragraph) <= width:
        return paragraph
    return line_separator.join(justify_lines(paragraph, width, max_space, word_break))
