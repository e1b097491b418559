"""Authentication state with explicit initialize/login/register/logout steps."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Protocol

import jwt

from quiz_client.api.schemas import AuthResponse, RegistrationPayload
from quiz_client.constants.quiz_constants import (
    ADMIN_ROLE,
    DEFAULT_ADMIN_COMPANY_KEY,
    MIN_PASSWORD_LENGTH,
    TOKEN_STORAGE_KEY,
    USER_ROLE,
)
from quiz_client.core.models import AuthState, AuthUser
from quiz_client.core.token_store import TokenStore

logger = logging.getLogger(__name__)


class AuthError(Exception):
    """Raised when signing in or registering fails."""


class AuthApi(Protocol):
    def login(self, email: str, password: str) -> AuthResponse: ...

    def register(self, payload: RegistrationPayload) -> AuthResponse: ...


@dataclass(slots=True)
class RegistrationForm:
    """Values entered on the registration screen."""

    username: str
    name: str
    email: str
    age: int
    gender: str
    password: str
    password_confirmation: str
    company_key: str = ""


@dataclass(frozen=True, slots=True)
class DecodedToken:
    user: AuthUser
    expires_at: float


def decode_token(token: str) -> DecodedToken:
    """Read the user and expiry from a token without verifying its signature.

    Raises ``jwt.InvalidTokenError`` when the token is malformed or lacks
    the expected claims.
    """
    claims = jwt.decode(token, options={"verify_signature": False})
    user = claims.get("user")
    exp = claims.get("exp")
    if not isinstance(user, dict) or not isinstance(exp, (int, float)):
        raise jwt.InvalidTokenError("Token is missing the user or exp claim.")
    return DecodedToken(
        user=AuthUser(username=str(user.get("username", "")), role=str(user.get("role", USER_ROLE))),
        expires_at=float(exp),
    )


class AuthSession:
    """Owns the signed-in user and the persisted token."""

    def __init__(
        self,
        api: AuthApi,
        store: TokenStore,
        admin_company_key: str = DEFAULT_ADMIN_COMPANY_KEY,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._api = api
        self._store = store
        self._admin_company_key = admin_company_key
        self._clock = clock
        self._state = AuthState()
        self._listeners: list[Callable[[AuthState], None]] = []

    # --- State access ---

    @property
    def state(self) -> AuthState:
        return self._state

    @property
    def user(self) -> AuthUser | None:
        return self._state.user

    @property
    def token(self) -> str | None:
        return self._state.token

    def is_authenticated(self) -> bool:
        return self._state.is_authenticated and self._state.user is not None

    def is_admin(self) -> bool:
        return self.is_authenticated() and self._state.user.is_admin

    def add_listener(self, listener: Callable[[AuthState], None]) -> None:
        self._listeners.append(listener)

    # --- Transitions ---

    def initialize(self) -> AuthState:
        """Restore a stored, unexpired token; discard anything else."""
        token = self._store.get(TOKEN_STORAGE_KEY)
        if not token:
            self._set_state(AuthState())
            return self._state

        try:
            decoded = decode_token(token)
        except jwt.InvalidTokenError as exc:
            logger.warning("Discarding invalid stored token: %s", exc)
            self._store.remove(TOKEN_STORAGE_KEY)
            self._set_state(AuthState())
            return self._state

        if decoded.expires_at <= self._clock():
            logger.info("Stored token has expired; signing out")
            self._store.remove(TOKEN_STORAGE_KEY)
            self._set_state(AuthState())
            return self._state

        logger.info("Restored session for %s", decoded.user.username)
        self._set_state(AuthState(is_authenticated=True, user=decoded.user, token=token))
        return self._state

    def login(self, email: str, password: str, as_admin: bool = False) -> AuthUser:
        response = self._api.login(email, password)
        if not response.success or not response.token:
            raise AuthError(response.message or "Login failed")

        decoded = self._decode_response_token(response.token)
        if as_admin and decoded.user.role != ADMIN_ROLE:
            raise AuthError("You are not authorized as an admin.")

        self._accept(response.token, decoded.user)
        return decoded.user

    def register(self, form: RegistrationForm) -> AuthUser:
        role = self._validate_registration(form)
        payload = RegistrationPayload(
            username=form.username,
            name=form.name,
            email=form.email,
            age=form.age,
            gender=form.gender,
            password=form.password,
            role=role,
        )
        response = self._api.register(payload)
        if not response.success or not response.token:
            raise AuthError(response.message or "Registration failed")

        decoded = self._decode_response_token(response.token)
        self._accept(response.token, decoded.user)
        return decoded.user

    def logout(self) -> None:
        self._store.remove(TOKEN_STORAGE_KEY)
        if self._state.user is not None:
            logger.info("Signed out %s", self._state.user.username)
        self._set_state(AuthState())

    # --- Internals ---

    def _validate_registration(self, form: RegistrationForm) -> str:
        if form.password != form.password_confirmation:
            raise AuthError("Passwords do not match")
        if len(form.password) < MIN_PASSWORD_LENGTH:
            raise AuthError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")
        if not form.company_key:
            return USER_ROLE
        if form.company_key != self._admin_company_key:
            raise AuthError("Invalid Company Key for Admin registration.")
        return ADMIN_ROLE

    @staticmethod
    def _decode_response_token(token: str) -> DecodedToken:
        try:
            return decode_token(token)
        except jwt.InvalidTokenError as exc:
            raise AuthError("The server returned an invalid token.") from exc

    def _accept(self, token: str, user: AuthUser) -> None:
        self._store.set(TOKEN_STORAGE_KEY, token)
        logger.info("Signed in %s (%s)", user.username, user.role)
        self._set_state(AuthState(is_authenticated=True, user=user, token=token))

    def _set_state(self, state: AuthState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)
