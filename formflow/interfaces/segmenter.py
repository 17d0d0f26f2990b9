"""Abstract base class for string segmentation strategies."""

import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

Pattern = str | re.Pattern[str]


@dataclass(frozen=True)
class PlainSegment:
    """Unmatched text between matches.

    Attributes:
        text: The plain text slice.
    """

    text: str


@dataclass(frozen=True)
class MatchSegment:
    """A pattern match.

    Attributes:
        text: The matched text.
        index: Zero-based ordinal of this match among all matches.
    """

    text: str
    index: int


TextSegment = PlainSegment | MatchSegment


class BaseSegmenter(ABC):
    """Abstract base class for segmentation strategies.

    Implementations split a string into an ordered sequence of segments
    whose texts concatenate back to the original string.
    """

    @abstractmethod
    def segment(self, source: str) -> Iterator[TextSegment]:
        """Split text into plain and matched segments.

        Args:
            source: The text to scan.

        Returns:
            An iterator over segments covering ``source`` exactly.
        """
        ...

    def replace_with_component(self, source: str, render: Callable[[str, int], Any]) -> list[Any]:
        """Replace every match with a rendered fragment.

        Args:
            source: The text to scan, typically a translated phrase.
            render: Called with the match text and its index.

        Returns:
            Plain text as ``str`` interleaved with rendered fragments.
        """
        return [
            render(part.text, part.index) if isinstance(part, MatchSegment) else part.text
            for part in self.segment(source)
        ]
