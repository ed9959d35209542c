"""Supavec API client.

Issues exactly one authenticated POST per call and folds the outcome
into a :class:`Success` or :class:`Failure` value.  Nothing here raises
on an upstream problem: transport errors, non-2xx statuses and bodies
that are not JSON all become a ``Failure`` carrying a message that
starts with ``"Failed to fetch data: "``.

Usage::

    async with UpstreamClient(api_key) as client:
        outcome = await client.execute("/embeddings", {"file_ids": [...], ...})
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from supavec_mcp.config.schema import SUPAVEC_BASE_URL

logger = logging.getLogger(__name__)

FAILURE_PREFIX = "Failed to fetch data: "


@dataclass(frozen=True, slots=True)
class Success:
    """Upstream returned 2xx with a JSON body."""

    payload: Any


@dataclass(frozen=True, slots=True)
class Failure:
    """Upstream call failed; ``message`` is ready for display."""

    message: str
    status_code: int | None = None


UpstreamOutcome = Success | Failure


def _error_detail(response: httpx.Response) -> str | None:
    """Return the upstream ``error`` field of a failed response, if any."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, str) and error:
            return error
    return None


class UpstreamClient:
    """Client for the Supavec REST API.

    The API key is sent verbatim in the ``authorization`` header; Supavec
    does not use a ``Bearer`` scheme.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = SUPAVEC_BASE_URL,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={
                "authorization": api_key,
                "content-type": "application/json",
            },
            transport=transport,
        )

    async def __aenter__(self) -> UpstreamClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    @property
    def base_url(self) -> str:
        return self._base_url

    async def execute(self, path: str, body: dict[str, Any]) -> UpstreamOutcome:
        """POST *body* as JSON to *path* and normalize the outcome."""
        logger.debug("POST %s%s", self._base_url, path)
        try:
            response = await self._client.post(path, content=json.dumps(body))
        except httpx.HTTPError as e:
            logger.warning("Request to %s failed: %s", path, e)
            return Failure(f"{FAILURE_PREFIX}{str(e) or type(e).__name__}")

        if not response.is_success:
            message = f"{FAILURE_PREFIX}status {response.status_code}"
            detail = _error_detail(response)
            if detail:
                message += f" ({detail})"
            logger.warning("%s returned %d", path, response.status_code)
            return Failure(message, status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning("%s returned a non-JSON body: %s", path, e)
            return Failure(f"{FAILURE_PREFIX}{e}", status_code=response.status_code)

        return Success(payload)
