"""Session manager: authentication state, credential checks, persistence."""

import logging
import uuid
from typing import Callable, Optional

from pydantic import ValidationError as PydanticValidationError

from taskboard.core.config import settings
from taskboard.core.errors import AuthRequiredError, CorruptStateError, ValidationError
from taskboard.core.security import OpaqueTokenStrategy, TokenStrategy
from taskboard.schemas.user import SessionState, User
from taskboard.services.storage import StorageArea, TASKS_KEY, TOKEN_KEY, USER_KEY

logger = logging.getLogger(__name__)

# Espace de noms pour dériver un id stable depuis l'email
USER_NAMESPACE = uuid.uuid5(uuid.NAMESPACE_DNS, "taskboard.local")


def _blank(value: Optional[str]) -> bool:
    return not value or value.strip() == ""


def check_credentials(email: str, password: str) -> None:
    """Raise ValidationError for the first broken rule, in a fixed order."""
    if _blank(email):
        raise ValidationError("Please provide an email address")
    if _blank(password):
        raise ValidationError("Please provide a password")
    if "@" not in email:
        raise ValidationError("Please provide a valid email address")
    if len(password) < 3:
        raise ValidationError("Password must be at least 3 characters long")


def make_user(email: str, username: str = None) -> User:
    return User(
        id=str(uuid.uuid5(USER_NAMESPACE, email)),
        username=username if username is not None else email.split("@")[0],
        email=email,
    )


class SessionManager:
    """
    Owns the session state machine:

        INIT(loading) -> AUTHENTICATED | ANONYMOUS
        ANONYMOUS -> AUTHENTICATED   via login / register
        AUTHENTICATED -> ANONYMOUS   via logout

    `navigate` is called with the route the caller should show next.
    """

    def __init__(
        self,
        storage: StorageArea,
        tokens: TokenStrategy = None,
        navigate: Optional[Callable[[str], None]] = None,
    ):
        self._storage = storage
        self._tokens = tokens or OpaqueTokenStrategy()
        self._navigate = navigate
        self._state = SessionState()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def token(self) -> Optional[str]:
        return self._state.token

    def restore(self) -> SessionState:
        if not self._state.loading:
            return self._state

        token = self._storage.get(TOKEN_KEY)
        raw_user = self._storage.get(USER_KEY)

        if token and raw_user:
            try:
                user = self._load_user(raw_user)
            except CorruptStateError as e:
                logger.warning(f"Discarding persisted session: {e}")
                self._storage.remove(TOKEN_KEY)
                self._storage.remove(USER_KEY)
                self._state = SessionState.anonymous()
            else:
                self._state = SessionState.authenticated(user, token)
                logger.info(f"Session restored for {user.email}")
        else:
            self._state = SessionState.anonymous()

        return self._state

    def login(self, email: str, password: str) -> SessionState:
        try:
            check_credentials(email, password)
        except ValidationError as e:
            logger.debug(f"Login rejected: {e.message}")
            raise
        return self._open(make_user(email))

    def register(self, username: str, email: str, password: str) -> SessionState:
        try:
            if _blank(username):
                raise ValidationError("Please provide a username")
            check_credentials(email, password)
        except ValidationError as e:
            logger.debug(f"Registration rejected: {e.message}")
            raise
        return self._open(make_user(email, username))

    def logout(self) -> SessionState:
        self._storage.remove(TOKEN_KEY)
        self._storage.remove(USER_KEY)
        self._storage.remove(TASKS_KEY)
        self._state = SessionState.anonymous()
        logger.info("Session closed, local data cleared")
        self._go(settings.LOGIN_ROUTE)
        return self._state

    def require_token(self) -> str:
        if not self._state.is_authenticated:
            raise AuthRequiredError("Not authenticated")
        return self._state.token

    def _open(self, user: User) -> SessionState:
        token = self._tokens.issue(user)

        # Persister avant de rendre l'état observable
        self._storage.set(TOKEN_KEY, token)
        self._storage.set(USER_KEY, user.model_dump_json())

        self._state = SessionState.authenticated(user, token)
        logger.info(f"Session opened for {user.email}")
        self._go(settings.HOME_ROUTE)
        return self._state

    def _go(self, route: str) -> None:
        if self._navigate is not None:
            self._navigate(route)

    @staticmethod
    def _load_user(raw: str) -> User:
        try:
            return User.model_validate_json(raw)
        except PydanticValidationError as e:
            raise CorruptStateError(USER_KEY, str(e.errors()[0]["msg"])) from e
