"""Concrete validator implementations."""

from formflow.strategies.validators.constraint import ConstraintValidator, validate
from formflow.strategies.validators.rules import LengthRule, PresenceRule, build_rule

__all__ = [
    "ConstraintValidator",
    "validate",
    "PresenceRule",
    "LengthRule",
    "build_rule",
]
