"""Sign-in screen composition.

Wires translated strings, navigation, the sign-in mutation and the session
store to a FormEngine. The screen draws nothing itself: ``form_view`` turns
engine snapshots into a SignInFormView that any UI toolkit can display.
"""

import enum
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from formflow.core.config import CredentialsConfig
from formflow.core.factory import ComponentFactory
from formflow.forms import FormEngine
from formflow.interfaces.form import FormSnapshot, SubmissionError
from formflow.interfaces.screen import (
    BaseNavigator,
    BaseSessionStore,
    BaseSignInClient,
    BaseTranslator,
    Route,
)
from formflow.interfaces.validator import ValidationErrors, ValidationOptions

logger = logging.getLogger(__name__)

PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 100


class Tab(str, enum.Enum):
    """Tabs shown above the sign-in form."""

    SIGN_IN = "signIn"
    SIGN_UP = "signUp"


@dataclass(frozen=True)
class Highlight:
    """A highlighted fragment of the instruction phrase.

    Attributes:
        text: The highlighted text.
        key: Stable identity when fragments are rendered as a list.
    """

    text: str
    key: str


@dataclass(frozen=True)
class SignInFormView:
    """Everything a renderer needs to draw the sign-in form."""

    values: Mapping[str, Any]
    phone_label: str
    phone_placeholder: str
    password_label: str
    password_placeholder: str
    submit_title: str
    forgot_password_title: str
    is_progress: bool
    field_errors: ValidationErrors
    on_submit: Callable[[], Any]
    on_forgot_password: Callable[[], None]


def _get_path(data: Any, path: str) -> Any:
    for key in path.split("."):
        if not isinstance(data, Mapping):
            return None
        data = data.get(key)
    return data


class SignInScreen:
    """Sign-in by phone number and password.

    Args:
        translator: Translated string lookup.
        navigator: Navigation stack.
        client: Network client running the sign-in mutation.
        session: Session store receiving the issued tokens.
        credentials: Values used to prefill the form.
        factory: Component factory. If None, one is built from global settings.
    """

    def __init__(
        self,
        translator: BaseTranslator,
        navigator: BaseNavigator,
        client: BaseSignInClient,
        session: BaseSessionStore,
        credentials: CredentialsConfig | None = None,
        factory: ComponentFactory | None = None,
    ) -> None:
        self._translator = translator
        self._navigator = navigator
        self._client = client
        self._session = session
        self._factory = factory or ComponentFactory()
        self._credentials = credentials or self._factory.settings.credentials

    # =========================================================================
    # Form configuration
    # =========================================================================

    def initial_values(self) -> dict[str, Any]:
        """Initial form values, also sent verbatim as mutation variables."""
        return {
            "phone": self._credentials.phone,
            "password": self._credentials.password,
            "withRefresh": True,
        }

    def constraints(self) -> dict[str, dict[str, Any]]:
        return {
            "phone": {
                "presence": {"allowEmpty": False},
            },
            "password": {
                "presence": {"allowEmpty": False},
                "length": {"minimum": PASSWORD_MIN_LENGTH, "maximum": PASSWORD_MAX_LENGTH},
            },
        }

    def validate(self, values: Mapping[str, Any]) -> ValidationErrors:
        options = ValidationOptions(
            alias={
                "phone": self._translator.t("screen.signIn.form.label.phone"),
                "password": self._translator.t("screen.signIn.form.label.password"),
            }
        )
        return self._factory.get_validator().validate(self.constraints(), values, options)

    async def on_submit(self, values: Mapping[str, Any]) -> Mapping[str, Any]:
        """Run the sign-in mutation and store the issued tokens.

        Returns:
            The sign-in payload from the mutation response.

        Raises:
            SubmissionError: If the response carries no tokens.
        """
        response = await self._client.sign_in_by_phone(dict(values))
        payload = _get_path(response, "data.signInByPhone")

        if not isinstance(payload, Mapping) or not payload.get("accessToken"):
            raise SubmissionError("Sign-in response did not include an access token")

        self._session.sign_in_success(
            token=payload["accessToken"],
            refresh_token=payload.get("refreshToken", ""),
        )
        logger.info("Signed in by phone")
        return payload

    def create_form(self) -> FormEngine:
        return self._factory.create_form(
            initial_values=self.initial_values(),
            validate=self.validate,
            on_submit=self.on_submit,
        )

    # =========================================================================
    # Presentation
    # =========================================================================

    def header(self) -> dict[str, str]:
        """Title and description shown above the instruction."""
        return {
            "title": self._translator.t("screen.signIn.phrase.bfast"),
            "description": self._translator.t("screen.signIn.phrase.importantApp"),
        }

    def instruction(self) -> list[str | Highlight]:
        """The instruction phrase with highlighted tokens spliced in."""
        segmenter = self._factory.get_segmenter()
        return segmenter.replace_with_component(
            self._translator.t("screen.signIn.phrase.useBfast"),
            lambda match, i: Highlight(text=match, key=f"{match}{i}"),
        )

    def tabs(self) -> list[dict[str, str]]:
        return [
            {"id": Tab.SIGN_IN.value, "label": self._translator.t("screen.signIn.phrase.signIn")},
            {"id": Tab.SIGN_UP.value, "label": self._translator.t("screen.signIn.phrase.signUp")},
        ]

    def handle_tab_change(self, next_tab: Tab | str) -> None:
        if Tab(next_tab) is Tab.SIGN_UP:
            self._navigator.navigate(Route.SIGN_UP)

    def handle_forgot_password(self, values: Mapping[str, Any]) -> Callable[[], None]:
        phone = values.get("phone")

        def navigate() -> None:
            self._navigator.navigate(Route.FORGOT_PASSWORD, {"phone": phone})

        return navigate

    def form_view(self, snapshot: FormSnapshot) -> SignInFormView:
        t = self._translator.t
        return SignInFormView(
            values=snapshot.values,
            phone_label=t("screen.signIn.form.label.phone"),
            phone_placeholder=t("screen.signIn.form.placeholder.phone"),
            password_label=t("screen.signIn.form.label.password"),
            password_placeholder=t("screen.signIn.form.placeholder.password"),
            submit_title=t("screen.signIn.button.signIn"),
            forgot_password_title=t("screen.signIn.button.forgotPassword"),
            is_progress=snapshot.submitting,
            field_errors=snapshot.field_errors,
            on_submit=snapshot.handle_submit,
            on_forgot_password=self.handle_forgot_password(snapshot.values),
        )
