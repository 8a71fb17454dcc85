from __future__ import annotations

from lecture_catalog.domain.user import User
from lecture_catalog.ports.identity_provider import IdentityProvider


class StaticIdentityProvider(IdentityProvider):
    """Holds the signed-in user in memory for the lifetime of a session."""

    def __init__(self, user: User | None = None) -> None:
        self._user = user

    def current_user(self) -> User | None:
        return self._user

    def sign_in(self, user: User) -> None:
        self._user = user

    def sign_out(self) -> None:
        self._user = None
