"""HTTP client for the catalog platform REST API."""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError as PydanticValidationError

from catalogsync.adapters.http_resilience import ResilientClient
from catalogsync.domain.errors import ConflictError, TransportError

from .schema import ErrorResponse, QueryResponse

if TYPE_CHECKING:
    from collections.abc import Callable, Collection, Sequence
    from types import TracebackType

    from catalogsync.config import PlatformConfig, ResilienceConfig

    from .translator import JsonObject

log = getLogger(__name__)

MAX_QUERY_LIMIT = 500


def key_predicate(keys: Collection[str], field: str = "key") -> str:
    """Build a ``field in (...)`` predicate with JSON-quoted values."""

    quoted = ", ".join(json.dumps(key) for key in sorted(keys))
    return f"{field} in ({quoted})"


class PlatformClient:
    """Low-level client; one instance serves a whole sync run.

    Resource reads and writes go through an uncached client; lookups of
    stable reference kinds may use the cached reference client.
    """

    def __init__(
        self,
        *,
        config: PlatformConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._client_factory = client_factory or ResilientClient
        self._client: ResilientClient | None = None
        self._reference_client: ResilientClient | None = None

    async def __aenter__(self) -> PlatformClient:
        self._client = self._client_factory(self._config.resilience)
        self._reference_client = self._client_factory(self._config.reference_resilience)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        for client in (self._client, self._reference_client):
            if client is not None:
                await client.aclose()
        self._client = None
        self._reference_client = None

    async def query(
        self,
        path: str,
        *,
        keys: Collection[str],
        field: str = "key",
        params: dict[str, str] | None = None,
        cached: bool = False,
    ) -> list[JsonObject]:
        """Return all resources under ``path`` whose ``field`` is one of ``keys``."""

        if not keys:
            return []
        # only resource keys are unique; several inventory entries share a sku
        limit = min(len(keys), MAX_QUERY_LIMIT) if field == "key" else MAX_QUERY_LIMIT
        query_params = {
            **(params or {}),
            "where": key_predicate(keys, field),
            "limit": str(limit),
        }
        client = self._reference if cached else self._resources
        payload = await self._send(client, "GET", path, params=query_params)
        try:
            return QueryResponse.model_validate(payload).results
        except PydanticValidationError as exc:
            raise TransportError(f"Malformed query response from {path}: {exc}") from exc

    async def create(self, path: str, body: JsonObject) -> JsonObject:
        return await self._send(self._resources, "POST", path, body=body)

    async def update(
        self,
        path: str,
        resource_id: str,
        *,
        version: int,
        actions: Sequence[JsonObject],
        key: str | None = None,
    ) -> JsonObject:
        body = {"version": version, "actions": list(actions)}
        try:
            return await self._send(self._resources, "POST", f"{path}/{resource_id}", body=body)
        except ConflictError as exc:
            raise ConflictError(
                f"Version mismatch while updating '{key or resource_id}': {exc.message}",
                key=key,
                expected_version=version,
                current_version=exc.current_version,
            ) from exc

    @property
    def _resources(self) -> ResilientClient:
        if self._client is None:
            raise RuntimeError("PlatformClient must be used as an async context manager")
        return self._client

    @property
    def _reference(self) -> ResilientClient:
        if self._reference_client is None:
            raise RuntimeError("PlatformClient must be used as an async context manager")
        return self._reference_client

    async def _send(
        self,
        client: ResilientClient,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        body: JsonObject | None = None,
    ) -> JsonObject:
        try:
            if body is None:
                response = await client.request(method, path, params=params)
            else:
                response = await client.request(method, path, params=params, json=body)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise _status_error(method, path, exc.response) from exc
        except httpx.HTTPError as exc:
            log.error("Platform request %s %s failed: %s", method, path, exc)
            raise TransportError(f"{method} {path} failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise TransportError(
                f"Unexpected platform response payload for {method} {path}: {exc}"
            ) from exc
        if not isinstance(payload, dict):
            raise TransportError(f"Unexpected platform response payload for {method} {path}")
        return payload


def _status_error(
    method: str, path: str, response: httpx.Response
) -> TransportError | ConflictError:
    error = _parse_error(response)
    message = error.message if error and error.message else response.reason_phrase
    log.error("Platform error %s for %s %s: %s", response.status_code, method, path, message)
    if response.status_code == httpx.codes.CONFLICT:
        return ConflictError(
            message,
            current_version=error.current_version if error else None,
        )
    return TransportError(
        f"{method} {path} failed with status {response.status_code}: {message}",
        status_code=response.status_code,
    )


def _parse_error(response: httpx.Response) -> ErrorResponse | None:
    try:
        return ErrorResponse.model_validate(response.json())
    except (ValueError, PydanticValidationError):
        return None
