"""Port for resolving auth sessions - driven/secondary port."""

from typing import Protocol

from ...domain.value_objects import Session


class SessionProvider(Protocol):
    """Resolves an access token into a session using the auth backend."""

    async def get_session(self, access_token: str) -> Session | None:
        """Return the session for a token, or None if it is missing or invalid."""
        ...
