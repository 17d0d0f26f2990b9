"""Concrete strategy implementations."""

from formflow.strategies.segmenters import (
    TokenSegmenter,
)
from formflow.strategies.validators import (
    ConstraintValidator,
    LengthRule,
    PresenceRule,
)

__all__ = [
    "ConstraintValidator",
    "PresenceRule",
    "LengthRule",
    "TokenSegmenter",
]
