"""Component Factory for validator, segmenter and form instantiation.

Screens ask the factory for their collaborators instead of constructing
strategy classes directly, so the strategies can be swapped from
configuration.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any

from formflow.core.config import Settings, get_settings
from formflow.forms import FormEngine
from formflow.interfaces.form import SubmitCallback, ValidateCallback
from formflow.interfaces.segmenter import BaseSegmenter, Pattern
from formflow.interfaces.validator import BaseValidator
from formflow.strategies.segmenters import TokenSegmenter
from formflow.strategies.validators import ConstraintValidator

logger = logging.getLogger(__name__)


class ComponentFactory:
    """Factory for creating component instances based on configuration.

    Example:
        ```python
        factory = ComponentFactory(get_settings())

        validator = factory.get_validator()
        segmenter = factory.get_segmenter()
        form = factory.create_form(initial_values, validate, on_submit)
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the factory with optional settings.

        Args:
            settings: Application settings. If None, uses global settings.
        """
        self._settings = settings or get_settings()
        self._validator_cache: BaseValidator | None = None
        self._segmenter_cache: BaseSegmenter | None = None

    @property
    def settings(self) -> Settings:
        return self._settings

    def get_validator(self) -> BaseValidator:
        """Get the shared validator instance.

        Validators are stateless, so a single instance is reused.
        """
        if self._validator_cache is None:
            logger.info("Instantiating validator: constraint")
            self._validator_cache = ConstraintValidator()
        return self._validator_cache

    def get_segmenter(self, pattern: Pattern | None = None) -> BaseSegmenter:
        """Get a segmenter for the given pattern.

        Args:
            pattern: The pattern to match. If None, uses the configured
                highlight pattern and caches the instance.

        Returns:
            A BaseSegmenter implementation instance.

        Raises:
            ValueError: If the pattern is not a valid regular expression.
        """
        if pattern is not None:
            return self._build_segmenter(pattern)

        if self._segmenter_cache is None:
            logger.info(f"Instantiating segmenter: {self._settings.highlight_pattern}")
            self._segmenter_cache = self._build_segmenter(self._settings.highlight_pattern)
        return self._segmenter_cache

    def create_form(
        self,
        initial_values: Mapping[str, Any],
        validate: ValidateCallback,
        on_submit: SubmitCallback,
    ) -> FormEngine:
        """Create a new form engine. Each screen owns its own instance."""
        return FormEngine(initial_values=initial_values, validate=validate, on_submit=on_submit)

    @staticmethod
    def _build_segmenter(pattern: Pattern) -> BaseSegmenter:
        try:
            return TokenSegmenter(pattern)
        except re.error as e:
            raise ValueError(f"Invalid segmentation pattern {pattern!r}: {e}") from e
