"""Abstract base classes for field validation.

A validator evaluates a declarative rule set against a mapping of field
values and returns a fresh error map. Each rule kind is a strategy that
knows how to check a single field.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

FieldValues = Mapping[str, Any]
"""Field name to current value."""

ValidationErrors = dict[str, list[str]]
"""Field name to error messages. Valid fields are absent; empty means valid."""

ConstraintRules = Mapping[str, Mapping[str, Any]]
"""Field name to a mapping of rule kind to rule parameters."""

LabelResolver = Callable[[str], str | None]


@dataclass(frozen=True)
class ValidationOptions:
    """Options for a validation pass.

    Attributes:
        alias: Display label per field name.
        label_resolver: Optional callable consulted before ``alias``.
            Returning None falls through to the alias, then the raw name.
    """

    alias: Mapping[str, str] = field(default_factory=dict)
    label_resolver: LabelResolver | None = None

    def label_for(self, field_name: str) -> str:
        """Resolve the display label for a field."""
        if self.label_resolver is not None:
            label = self.label_resolver(field_name)
            if label:
                return label
        return self.alias.get(field_name) or field_name


class BaseRule(ABC):
    """Abstract base class for a single rule kind.

    Rules are constructed from their declared parameters and are
    immutable afterwards.

    Example:
        ```python
        class PresenceRule(BaseRule):
            kind = "presence"

            def check(self, value, present, label):
                return [] if present else [f"{label} is required"]
        ```
    """

    kind: str

    @abstractmethod
    def check(self, value: Any, present: bool, label: str) -> list[str]:
        """Check one field value.

        Args:
            value: The field value (None when absent).
            present: Whether the field key exists in the values mapping.
            label: Display label used in messages.

        Returns:
            Error messages, in the order the failures were found.
        """
        ...


class BaseValidator(ABC):
    """Abstract base class for validation strategies."""

    @abstractmethod
    def validate(
        self,
        rules: ConstraintRules,
        values: FieldValues,
        options: ValidationOptions | None = None,
    ) -> ValidationErrors:
        """Validate values against rules.

        Args:
            rules: Per-field rule declarations.
            values: Current field values. Never mutated.
            options: Label resolution options.

        Returns:
            A new error map; empty when every rule passes.
        """
        ...
