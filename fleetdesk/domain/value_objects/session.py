"""Authentication session value objects."""

from dataclasses import dataclass
from enum import StrEnum, auto


@dataclass(frozen=True, slots=True)
class Session:
    """An authenticated user session issued by the auth backend."""

    user_id: str
    email: str | None = None
    access_token: str = ""


@dataclass(frozen=True, slots=True)
class SessionState:
    """Snapshot of the auth context seen by a protected view."""

    session: Session | None
    loading: bool = False


class GateDecision(StrEnum):
    """What a protected view should do for a given session state."""

    PLACEHOLDER = auto()
    REDIRECT = auto()
    RENDER = auto()

    def __str__(self) -> str:
        return self.value
