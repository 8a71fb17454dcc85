from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class User:
    id: str
    email: str
    full_name: str | None = None
    role: str | None = None

    @property
    def display_name(self) -> str:
        """Name credited as instructor on uploaded lectures."""
        return self.full_name or self.email or "Anonymous"
