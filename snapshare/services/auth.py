"""Authentication session state and the broadcaster that reports its transitions.

Invariants:
    - At most one session is active; the initial state is signed out.
    - Listeners are called after the session has changed, synchronously and in
      subscription order.
    - Each dispatch works on a snapshot of the listeners; subscribing or
      unsubscribing during a dispatch takes effect on the next one.
    - A failed sign-up or sign-in leaves the session as it was.
    - A transition and its dispatch hold the store lock, so concurrent
      transitions are delivered in the order they were committed.
    - Sign-up stores the email stripped of surrounding whitespace; sign-in
      matches email and password exactly.
"""

import logging
from enum import Enum
from typing import Callable, Optional

from django.contrib.auth.hashers import check_password, make_password
from django.dispatch import Signal

from snapshare.entity_store import EntityStore
from snapshare.errors import InvalidCredentials, ValidationError
from snapshare.models import Session, User

logger = logging.getLogger(__name__)

Listener = Callable[["AuthEvent", Optional[Session]], None]


class AuthEvent(str, Enum):
    """Kinds of session transitions delivered to listeners."""
    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"


def default_username(email: str) -> str:
    """Return the local part of an email address."""
    return email.split("@")[0]


def _require_text(value, field: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{field.capitalize()} must be a string", field=field)
    return value


class Subscription:
    """Handle returned by ``subscribe``; ``unsubscribe`` removes exactly this registration."""

    def __init__(self, signal: Signal, receiver) -> None:
        self._signal = signal
        self._receiver = receiver
        self.active = True

    def unsubscribe(self) -> bool:
        """Stop delivering events to the listener; safe to call from inside one."""
        self.active = False
        return self._signal.disconnect(self._receiver)


class AuthSessionManager:
    """Sign-up, sign-in and sign-out over the user table, with change notification."""

    def __init__(self, store: EntityStore) -> None:
        self.store = store
        self.session_changed = Signal()
        self._session: Optional[Session] = None

    # --- state -----------------------------------------------------------
    def get_session(self) -> Optional[Session]:
        """Return the current session or None. Never notifies."""
        return self._session

    # --- transitions -----------------------------------------------------
    def sign_up(self, email: str, password: str, username: str = "") -> User:
        """Create a user with its profile and sign it in."""
        email = _require_text(email, "email").strip()
        if not email:
            raise ValidationError("Email is required", field="email")
        if not _require_text(password, "password"):
            raise ValidationError("Password is required", field="password")
        username = (username or "").strip() or default_username(email)
        user = self.store.create_account(email, make_password(password), username)
        self._transition(AuthEvent.SIGNED_IN, Session(user=user))
        return user

    def sign_in(self, email: str, password: str) -> User:
        """Sign in the user matching both email and password exactly."""
        _require_text(email, "email")
        _require_text(password, "password")
        user = self.store.users.get_by_email(email)
        if user is None or not check_password(password, user.password):
            logger.info("Rejected sign-in for %s", email)
            raise InvalidCredentials()
        self._transition(AuthEvent.SIGNED_IN, Session(user=user))
        return user

    def sign_out(self) -> None:
        """End the session. Always succeeds, even when already signed out."""
        self._transition(AuthEvent.SIGNED_OUT, None)

    def _transition(self, event: AuthEvent, session: Optional[Session]) -> None:
        # Listeners run under the lock so no other transition interleaves.
        with self.store.lock:
            self._session = session
            logger.debug("Session transition: %s", event.value)
            self._notify(event, session)

    # --- listeners -------------------------------------------------------
    def subscribe(self, listener: Listener) -> Subscription:
        """Call ``listener(event, session)`` on every transition from now on."""

        def receiver(sender, event, session, **kwargs):
            return listener(event, session)

        self.session_changed.connect(receiver, weak=False)
        return Subscription(self.session_changed, receiver)

    def _notify(self, event: AuthEvent, session: Optional[Session]) -> None:
        responses = self.session_changed.send_robust(sender=self, event=event, session=session)
        for _receiver, response in responses:
            if isinstance(response, Exception):
                logger.warning(
                    "Session listener failed on %s: %s",
                    event.value,
                    response,
                    exc_info=response,
                )
