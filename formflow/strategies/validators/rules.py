"""Rule kind strategies.

Each rule kind parses its declared parameters with a Pydantic model and
checks a single field value. Parameters accept both the camelCase spelling
used in declarative rule sets (``allowEmpty``) and snake_case.
"""

import logging
from collections.abc import Mapping, Sized
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from formflow.interfaces.validator import BaseRule

logger = logging.getLogger(__name__)


class PresenceParams(BaseModel):
    """Parameters of the ``presence`` rule."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    allow_empty: bool = Field(
        default=True,
        alias="allowEmpty",
        description="If False, empty strings and collections are rejected.",
    )


class LengthParams(BaseModel):
    """Parameters of the ``length`` rule."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    minimum: int | None = Field(default=None, ge=0)
    maximum: int | None = Field(default=None, ge=0)
    is_: int | None = Field(default=None, ge=0, alias="is")


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return len(value) == 0
    return False


class PresenceRule(BaseRule):
    """Fails when the value is missing, or empty if empty is not allowed."""

    kind = "presence"

    def __init__(self, params: PresenceParams) -> None:
        self._params = params

    def check(self, value: Any, present: bool, label: str) -> list[str]:
        if not present or value is None:
            return [f"{label} is required"]
        if not self._params.allow_empty and _is_empty(value):
            return [f"{label} is required"]
        return []


class LengthRule(BaseRule):
    """Bounds the length of a present value.

    ``is``, ``minimum`` and ``maximum`` are checked independently, so a
    single value can produce more than one message.
    """

    kind = "length"

    def __init__(self, params: LengthParams) -> None:
        self._params = params

    def check(self, value: Any, present: bool, label: str) -> list[str]:
        if not present or value is None:
            return []
        if not isinstance(value, Sized):
            return [f"{label} has an incorrect length"]

        length = len(value)
        errors: list[str] = []

        if self._params.is_ is not None and length != self._params.is_:
            errors.append(
                f"{label} is the wrong length (should be {self._params.is_} characters)"
            )
        if self._params.minimum is not None and length < self._params.minimum:
            errors.append(
                f"{label} is too short (minimum is {self._params.minimum} characters)"
            )
        if self._params.maximum is not None and length > self._params.maximum:
            errors.append(
                f"{label} is too long (maximum is {self._params.maximum} characters)"
            )

        return errors


RULE_TYPES: dict[str, tuple[type[BaseRule], type[BaseModel]]] = {
    PresenceRule.kind: (PresenceRule, PresenceParams),
    LengthRule.kind: (LengthRule, LengthParams),
}


def build_rule(kind: str, params: Any) -> BaseRule | None:
    """Instantiate a rule from its declaration.

    Args:
        kind: The rule kind, e.g. ``"presence"``.
        params: Parameter mapping, ``True`` for default parameters, or a
            falsy value to disable the rule.

    Returns:
        The rule, or None for unknown kinds, disabled rules and malformed
        parameters. Malformed parameters are logged, never raised.
    """
    if kind not in RULE_TYPES:
        logger.debug(f"Ignoring unknown rule kind: {kind}")
        return None

    if params is None or params is False:
        return None

    rule_cls, params_cls = RULE_TYPES[kind]
    if params is True:
        params = {}

    if not isinstance(params, Mapping):
        logger.warning(f"Ignoring '{kind}' rule with non-mapping parameters: {params!r}")
        return None

    try:
        parsed = params_cls.model_validate(dict(params))
    except ValidationError as e:
        logger.warning(f"Ignoring malformed '{kind}' rule: {e}")
        return None

    return rule_cls(parsed)
