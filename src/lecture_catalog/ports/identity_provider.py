from __future__ import annotations

from abc import ABC, abstractmethod

from lecture_catalog.domain.user import User


class IdentityProvider(ABC):
    @abstractmethod
    def current_user(self) -> User | None: ...
