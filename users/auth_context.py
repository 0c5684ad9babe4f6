"""
Per-request authentication context.

`AuthContextMiddleware` attaches an `AuthContext` to every request as
`request.auth_context`. Views use it to sign users up, in and out and to read
the current `Session`. The session value starts out as `SessionState.UNKNOWN`
and is resolved from `request.user` the first time it is read; the receivers
in `users/signals.py` keep it in step with Django's login/logout signals.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from django.contrib.auth import authenticate, get_user_model, login, logout
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from django.db import DatabaseError, IntegrityError

from medi.errors import AuthError, report

logger = logging.getLogger(__name__)

User = get_user_model()

INVALID_CREDENTIALS = "Invalid login credentials"
ALREADY_REGISTERED = "User already registered"


class SessionState(Enum):
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Session:
    pk: int
    user_id: str
    email: str

    @classmethod
    def from_user(cls, user) -> "Session":
        return cls(pk=user.pk, user_id=user.user_id, email=user.email)


@dataclass(frozen=True)
class AuthResult:
    success: bool
    data: Any = None
    error: Optional[str] = None


class AuthContext:
    def __init__(self, request):
        self.request = request
        self._session = SessionState.UNKNOWN

    @property
    def is_resolved(self) -> bool:
        return self._session is not SessionState.UNKNOWN

    @property
    def session(self) -> Optional[Session]:
        if self._session is SessionState.UNKNOWN:
            user = getattr(self.request, "user", None)
            if user is not None and user.is_authenticated:
                self._session = Session.from_user(user)
            else:
                self._session = None
        return self._session

    def set_session(self, user) -> None:
        self._session = Session.from_user(user)

    def clear_session(self) -> None:
        self._session = None

    def sign_up(self, email: str, password: str) -> AuthResult:
        email = User.objects.normalize_email(email)

        if User.objects.filter(email=email).exists():
            logger.info("Sign-up rejected for existing account %s", email)
            return AuthResult(success=False, error=ALREADY_REGISTERED)

        user = User(email=email)
        try:
            validate_password(password, user)
        except ValidationError as e:
            return AuthResult(success=False, error=" ".join(e.messages))

        user.set_password(password)
        try:
            user.save()
        except IntegrityError:
            # lost a race with a concurrent sign-up for the same address
            return AuthResult(success=False, error=ALREADY_REGISTERED)
        except DatabaseError as e:
            logger.error("Error signing up %s: %s", email, e)
            return AuthResult(success=False, error="Unable to create account. Please try again.")

        login(self.request, user, backend="django.contrib.auth.backends.ModelBackend")
        logger.info("Sign-up success for %s", email)
        return AuthResult(success=True, data=self.session)

    def sign_in(self, email: str, password: str) -> AuthResult:
        email = User.objects.normalize_email(email)
        try:
            user = authenticate(self.request, email=email, password=password)
        except DatabaseError as e:
            logger.error("Unexpected error during sign-in: %s", e)
            return AuthResult(success=False, error="An unexpected error occurred. Please try again.")

        if user is None:
            logger.info("Sign-in failed for %s", email)
            return AuthResult(success=False, error=INVALID_CREDENTIALS)

        login(self.request, user)
        return AuthResult(success=True, data=self.session)

    def sign_out(self) -> None:
        try:
            logout(self.request)
        except DatabaseError as e:
            report(self.request, AuthError("Error signing out", cause=e))
        # logout() fires user_logged_out only for authenticated users
        self.clear_session()
