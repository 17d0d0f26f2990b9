"""Constraint-based field validator.

Evaluates declarative rule sets of the form::

    {
        "password": {
            "presence": {"allowEmpty": False},
            "length": {"minimum": 6, "maximum": 100},
        },
    }

against a mapping of field values and returns ``{field: [messages]}``.
"""

import logging
from collections.abc import Mapping

from formflow.interfaces.validator import (
    BaseValidator,
    ConstraintRules,
    FieldValues,
    LabelResolver,
    ValidationErrors,
    ValidationOptions,
)
from formflow.strategies.validators.rules import build_rule

logger = logging.getLogger(__name__)


class ConstraintValidator(BaseValidator):
    """Validator driven by per-field rule declarations.

    Every declared rule is evaluated; nothing short-circuits across rule
    kinds. Messages for a field keep the declaration order of its rule
    kinds, and fields keep the declaration order of the rule set.
    Unknown rule kinds and malformed parameters are skipped.
    """

    def validate(
        self,
        rules: ConstraintRules,
        values: FieldValues,
        options: ValidationOptions | None = None,
    ) -> ValidationErrors:
        options = options or ValidationOptions()
        errors: ValidationErrors = {}

        for field_name, field_rules in rules.items():
            if not isinstance(field_rules, Mapping):
                logger.warning(f"Ignoring rules for '{field_name}': expected a mapping")
                continue

            present = field_name in values
            value = values.get(field_name)
            label = options.label_for(field_name)

            messages: list[str] = []
            for kind, params in field_rules.items():
                rule = build_rule(kind, params)
                if rule is None:
                    continue
                messages.extend(rule.check(value, present, label))

            if messages:
                errors[field_name] = messages

        if errors:
            logger.debug(f"Validation failed for fields: {', '.join(errors)}")

        return errors


def validate(
    rules: ConstraintRules,
    values: FieldValues,
    alias: Mapping[str, str] | None = None,
    label_resolver: LabelResolver | None = None,
) -> ValidationErrors:
    """Validate values against rules with a default ConstraintValidator.

    Args:
        rules: Per-field rule declarations.
        values: Current field values.
        alias: Display label per field name.
        label_resolver: Optional callable that resolves labels first.

    Returns:
        The error map; empty when valid.
    """
    options = ValidationOptions(alias=alias or {}, label_resolver=label_resolver)
    return ConstraintValidator().validate(rules, values, options)
