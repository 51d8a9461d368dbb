"""Async REST client for the hosted Supabase backend."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar

import httpx

from ....application.exceptions import RecordStoreError

logger = logging.getLogger(__name__)


class UniqueViolationError(RecordStoreError):
    """Raised when PostgREST reports a unique constraint violation."""

    def __init__(self, message: str, constraint: str | None = None) -> None:
        super().__init__(message)
        self.constraint = constraint


@dataclass(frozen=True, slots=True)
class SupabaseClientConfig:
    """Configuration for the Supabase REST client."""

    url: str
    api_key: str
    timeout: float = 30.0


class SupabaseClient:
    """
    Async client for the PostgREST and GoTrue endpoints of a Supabase project.

    Every request carries the project API key; user-scoped calls add the
    caller's bearer token so row level security applies.
    """

    REST_PATH: ClassVar[str] = "/rest/v1"
    AUTH_PATH: ClassVar[str] = "/auth/v1"
    UNIQUE_VIOLATION: ClassVar[str] = "23505"

    def __init__(
        self,
        config: SupabaseClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client. ``transport`` is for tests."""
        self._config = config
        self._transport = transport

    def _headers(self, access_token: str | None = None) -> dict[str, str]:
        return {
            "apikey": self._config.api_key,
            "Authorization": f"Bearer {access_token or self._config.api_key}",
            "Content-Type": "application/json",
        }

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._config.url.rstrip("/"),
            timeout=self._config.timeout,
            transport=self._transport,
        )

    async def select(
        self,
        table: str,
        *,
        filters: dict[str, str] | None = None,
        order: str | None = None,
        access_token: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        Select rows from a table.

        Args:
            table: Table name.
            filters: PostgREST filters, e.g. ``{"is_deleted": "not.is.true"}``.
            order: Ordering, e.g. ``"created_at.desc"``.
            access_token: Optional user token.

        Returns:
            List of row dictionaries.
        """
        params: dict[str, str] = {"select": "*", **(filters or {})}
        if order:
            params["order"] = order

        response = await self._request(
            "GET", f"{self.REST_PATH}/{table}", params=params, access_token=access_token
        )
        rows = _json(response, "GET", table)
        logger.debug("Selected %d rows from %s", len(rows), table)
        return rows

    async def insert(
        self,
        table: str,
        row: dict[str, Any],
        *,
        access_token: str | None = None,
    ) -> dict[str, Any]:
        """Insert a row and return the stored representation."""
        response = await self._request(
            "POST",
            f"{self.REST_PATH}/{table}",
            json=row,
            headers={"Prefer": "return=representation"},
            access_token=access_token,
        )
        return _single(_json(response, "POST", table), table)

    async def get_user(self, access_token: str) -> dict[str, Any] | None:
        """Resolve a user access token, or None if the token is rejected."""
        async with self._client() as client:
            try:
                response = await client.get(
                    f"{self.AUTH_PATH}/user", headers=self._headers(access_token)
                )
            except httpx.HTTPError as e:
                msg = f"Auth request failed: {e}"
                raise RecordStoreError(msg) from e

        if response.status_code in (401, 403):
            return None
        if response.is_error:
            msg = f"Auth request failed with HTTP {response.status_code}"
            raise RecordStoreError(msg)
        return _json(response, "GET", "auth user")

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
        access_token: str | None = None,
    ) -> httpx.Response:
        request_headers = {**self._headers(access_token), **(headers or {})}
        async with self._client() as client:
            try:
                response = await client.request(
                    method, path, params=params, json=json, headers=request_headers
                )
            except httpx.HTTPError as e:
                msg = f"{method} {path} failed: {e}"
                raise RecordStoreError(msg) from e

        if response.is_error:
            raise _error_from_response(method, path, response)
        return response


def _json(response: httpx.Response, method: str, target: str) -> Any:
    try:
        return response.json()
    except ValueError as e:
        msg = f"{method} {target} returned a non-JSON body (HTTP {response.status_code})"
        raise RecordStoreError(msg) from e


def _single(payload: Any, table: str) -> dict[str, Any]:
    if isinstance(payload, list):
        if not payload:
            msg = f"No row returned from {table}"
            raise RecordStoreError(msg)
        return payload[0]
    return payload


def _error_from_response(method: str, path: str, response: httpx.Response) -> RecordStoreError:
    try:
        body = response.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    message = body.get("message") or response.text or f"HTTP {response.status_code}"
    msg = f"{method} {path} failed with HTTP {response.status_code}: {message}"

    if body.get("code") == SupabaseClient.UNIQUE_VIOLATION:
        return UniqueViolationError(msg, constraint=_constraint_name(message))
    return RecordStoreError(msg)


def _constraint_name(message: str) -> str | None:
    # duplicate key value violates unique constraint "trips_trip_code_key"
    if '"' not in message:
        return None
    parts = message.split('"')
    return parts[1] if len(parts) > 2 else None
