"""Pattern-based string segmentation.

Splits a string into alternating plain and matched segments so that rich
fragments (highlights, links) can be spliced into translated phrases.
"""

import logging
import re
from collections.abc import Callable, Iterator
from typing import TypeVar

from formflow.interfaces.segmenter import (
    BaseSegmenter,
    MatchSegment,
    Pattern,
    PlainSegment,
    TextSegment,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _compile(pattern: Pattern) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern)


def segment(source: str, pattern: Pattern) -> Iterator[TextSegment]:
    """Yield plain and matched segments of ``source``.

    Matches are found left to right without overlap. Zero-width matches
    carry no text and are skipped. Concatenating the ``text`` of every
    segment reproduces ``source``.

    Args:
        source: The text to scan.
        pattern: Regular expression string or compiled pattern.

    Yields:
        PlainSegment for each non-empty gap, MatchSegment for each match.
    """
    regex = _compile(pattern)
    position = 0
    index = 0

    for match in regex.finditer(source):
        start, end = match.span()
        if start == end:
            continue

        if start > position:
            yield PlainSegment(source[position:start])

        yield MatchSegment(match.group(0), index)
        index += 1
        position = end

    if position < len(source):
        yield PlainSegment(source[position:])


def replace_with_component(
    source: str,
    render: Callable[[str, int], T],
    pattern: Pattern,
) -> list[str | T]:
    """Replace every match in ``source`` with a rendered fragment.

    Args:
        source: The text to scan, typically a translated phrase.
        render: Called with the match text and its index.
        pattern: Regular expression string or compiled pattern.

    Returns:
        Plain text as ``str`` interleaved with rendered fragments.
    """
    fragments: list[str | T] = []
    for part in segment(source, pattern):
        if isinstance(part, MatchSegment):
            fragments.append(render(part.text, part.index))
        else:
            fragments.append(part.text)
    return fragments


class TokenSegmenter(BaseSegmenter):
    """Segmenter bound to a single pattern.

    Attributes:
        pattern: The compiled pattern used for every call.
    """

    def __init__(self, pattern: Pattern) -> None:
        """Initialize the segmenter.

        Args:
            pattern: Regular expression string or compiled pattern.

        Raises:
            re.error: If ``pattern`` is not a valid regular expression.
        """
        self.pattern = _compile(pattern)
        logger.debug(f"Segmenter created for pattern: {self.pattern.pattern}")

    def segment(self, source: str) -> Iterator[TextSegment]:
        return segment(source, self.pattern)
