"""Concrete segmenter implementations."""

from formflow.strategies.segmenters.pattern import TokenSegmenter, replace_with_component, segment

__all__ = [
    "TokenSegmenter",
    "segment",
    "replace_with_component",
]
