"""
Session Manager
Single source of truth for who is logged in and whether they are an admin.
"""

import enum
import logging
from typing import Any, Awaitable, Callable, List, Optional

from pydantic import ValidationError

from homematch.api.auth import AuthApi
from homematch.core.exceptions import ApiRequestError, AuthError, HomeMatchError
from homematch.core.monitoring import MetricsTracker
from homematch.core.storage import TokenStore
from homematch.schemas.user import AuthResponse, SessionUser

logger = logging.getLogger(__name__)

SessionListener = Callable[[Optional[SessionUser]], None]


class SessionState(str, enum.Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    AUTHENTICATED = "authenticated"
    ANONYMOUS = "anonymous"


class SessionManager:
    """
    Owns the current user, the derived admin flag and the persisted token.

    All writes to the in-memory session go through _set_session(), which
    recomputes is_admin every time. Each login, signup, initialize, logout
    and 401 starts a new generation; a response that resolves after a newer
    generation began is discarded instead of resurrecting old state.
    """

    def __init__(self, auth_api: AuthApi, token_store: TokenStore):
        self.auth_api = auth_api
        self.token_store = token_store
        self._user: Optional[SessionUser] = None
        self._is_admin = False
        self._state = SessionState.UNINITIALIZED
        self._generation = 0
        self._listeners: List[SessionListener] = []
        auth_api.gateway.add_auth_expired_listener(self._on_auth_expired)

    # ------------------------------------------------------------------
    # Read-only view
    # ------------------------------------------------------------------

    @property
    def current_user(self) -> Optional[SessionUser]:
        return self._user

    @property
    def is_admin(self) -> bool:
        return self._is_admin

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def loading(self) -> bool:
        return self._state in (SessionState.UNINITIALIZED, SessionState.INITIALIZING)

    @property
    def is_authenticated(self) -> bool:
        return self._state == SessionState.AUTHENTICATED

    def add_listener(self, listener: SessionListener) -> None:
        """Call listener with the new user (or None) whenever the session is replaced"""
        self._listeners.append(listener)

    # ------------------------------------------------------------------
    # Writers
    # ------------------------------------------------------------------

    def _transition(self, state: SessionState) -> None:
        if state != self._state:
            logger.info(f"Session {self._state.value} -> {state.value}")
            MetricsTracker.track_session_transition(state.value)
        self._state = state

    def _set_session(self, user: Optional[SessionUser]) -> None:
        self._user = user
        self._is_admin = bool(user and user.is_admin)
        self._transition(SessionState.AUTHENTICATED if user else SessionState.ANONYMOUS)
        for listener in list(self._listeners):
            listener(user)

    def _next_generation(self) -> int:
        self._generation += 1
        return self._generation

    def _is_stale(self, generation: int, action: str) -> bool:
        if generation != self._generation:
            logger.warning(f"Discarding stale {action} response")
            return True
        return False

    def _on_auth_expired(self) -> None:
        # The gateway has already removed the token
        self._next_generation()
        self._set_session(None)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def initialize(self) -> Optional[SessionUser]:
        """
        Resolve the current user from the persisted token

        Never raises: any failure leaves the session anonymous and is logged.

        Returns:
            The session user, or None
        """
        generation = self._next_generation()
        self._transition(SessionState.INITIALIZING)
        user = None

        try:
            token = await self.token_store.get()
            if token:
                payload = await self.auth_api.get_current_user()
                if payload:
                    user = SessionUser.model_validate(payload)
        except Exception as e:
            logger.error(f"Auth check failed: {e}", exc_info=True)
            user = None

        # Still INITIALIZING means no newer operation has set the session
        if self._state != SessionState.INITIALIZING and self._is_stale(generation, "current-user"):
            return self._user

        self._set_session(user)
        return user

    async def login(self, email: str, password: str) -> Any:
        """
        Log in and persist the returned token

        Returns:
            The raw backend response

        Raises:
            AuthError: Credentials rejected or the request failed
            AuthExpiredError: The login call itself came back 401
        """
        return await self._authenticate(self.auth_api.login, "login", email, password)

    async def signup(self, email: str, password: str) -> Any:
        """Register, with the same persistence and error contract as login()"""
        return await self._authenticate(self.auth_api.signup, "signup", email, password)

    async def _authenticate(
        self,
        call: Callable[[str, str], Awaitable[Any]],
        action: str,
        email: str,
        password: str
    ) -> Any:
        generation = self._next_generation()

        try:
            response = await call(email, password)
        except AuthError as e:
            logger.error(f"{action.capitalize()} error: {e.message}")
            raise
        except ApiRequestError as e:
            logger.error(f"{action.capitalize()} error: {e.message}")
            raise AuthError(e.message, status_code=e.status_code, endpoint=e.endpoint) from e

        if self._is_stale(generation, action):
            return response

        try:
            auth = AuthResponse.model_validate(response or {})
        except ValidationError as e:
            raise AuthError(f"Invalid {action} response") from e

        if auth.user is None:
            raise AuthError(f"Invalid {action} response")

        if auth.token:
            await self.token_store.set(auth.token)
            if self._is_stale(generation, action):
                await self.token_store.remove()
                return response

        self._set_session(auth.user)
        return response

    async def logout(self) -> None:
        """Log out remotely (best effort) and always clear local state"""
        self._next_generation()
        try:
            await self.auth_api.logout()
        except HomeMatchError as e:
            logger.error(f"Logout error: {e.message}")
        finally:
            await self.token_store.remove()
            self._set_session(None)
