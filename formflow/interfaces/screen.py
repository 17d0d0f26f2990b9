"""Collaborator interfaces for screen composition.

Screens wire translated strings, navigation, a network client and a
session store to the form engine. These base classes describe only what
the screens need from each collaborator.
"""

import enum
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class Route(str, enum.Enum):
    """Navigation destinations reachable from the sign-in screen."""

    SIGN_UP = "SignUp"
    FORGOT_PASSWORD = "ForgotPassword"


class BaseTranslator(ABC):
    """Looks up translated strings by key."""

    @abstractmethod
    def t(self, key: str) -> str:
        """Return the translated string for ``key``."""
        ...


class BaseNavigator(ABC):
    """Pushes routes onto the navigation stack."""

    @abstractmethod
    def navigate(self, route: Route, params: Mapping[str, Any] | None = None) -> None:
        """Navigate to ``route`` with optional parameters."""
        ...


class BaseSignInClient(ABC):
    """Network client for the sign-in mutation."""

    @abstractmethod
    async def sign_in_by_phone(self, variables: Mapping[str, Any]) -> Mapping[str, Any]:
        """Run the sign-in mutation.

        Args:
            variables: Form values sent as mutation variables.

        Returns:
            The raw mutation response, with tokens under
            ``data.signInByPhone``.
        """
        ...


class BaseSessionStore(ABC):
    """Application-wide session state."""

    @abstractmethod
    def sign_in_success(self, token: str, refresh_token: str) -> None:
        """Record a successful sign-in."""
        ...
