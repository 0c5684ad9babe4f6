"""
Error kinds shared by the apps and the policy for each one.

Every failure that crosses a service boundary (auth, row store, object
storage, text generation) is raised as one of the MediError subclasses below.
Views hand them to `report()`, which logs them and, when the policy says the
user should see it, queues a message for the next rendered page.
"""
import logging
from dataclasses import dataclass
from enum import Enum

from django.contrib import messages

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    AUTH = "auth"
    STORE = "store"
    STORAGE = "storage"
    GENERATION = "generation"


@dataclass(frozen=True)
class ErrorPolicy:
    retry: bool
    user_visible: bool


# nothing is retried - failures are reported once to the action that caused them
POLICIES = {
    ErrorKind.AUTH: ErrorPolicy(retry=False, user_visible=True),
    ErrorKind.STORE: ErrorPolicy(retry=False, user_visible=True),
    ErrorKind.STORAGE: ErrorPolicy(retry=False, user_visible=True),
    ErrorKind.GENERATION: ErrorPolicy(retry=False, user_visible=True),
}


class MediError(Exception):
    kind: ErrorKind = None

    def __init__(self, message, *, cause=None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    @property
    def policy(self) -> ErrorPolicy:
        return POLICIES[self.kind]


class AuthError(MediError):
    kind = ErrorKind.AUTH


class StoreError(MediError):
    kind = ErrorKind.STORE


class StorageError(MediError):
    kind = ErrorKind.STORAGE


class GenerationError(MediError):
    kind = ErrorKind.GENERATION


def report(request, error: MediError, message: str = None, *, visible: bool = None) -> None:
    """
    Log an error and surface it to the user if its policy allows.

    `visible` overrides the policy for call sites that degrade silently,
    e.g. row reads that fall back to an empty view.
    """
    logger.error("%s error: %s", error.kind.value, error.message, exc_info=error.cause)

    show = error.policy.user_visible if visible is None else visible
    if show and request is not None:
        messages.error(request, message or error.message)
