"""Tool dispatcher: routes tool calls to Supavec API requests.

Each call goes through the same steps: look the tool up in the
registry, validate its arguments, issue one upstream request, then
render the outcome as a :class:`ToolResult`.

Unknown tools and invalid arguments are raised as :class:`ToolError`
so the protocol layer can report them as errors.  Upstream failures are
data, not errors: they come back as a text block that starts with
``"Failed to retrieve ..."``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from supavec_mcp.core.errors import ToolNotFoundError
from supavec_mcp.tools.base import JSON_MIME_TYPE, ContentBlock, ToolResult
from supavec_mcp.tools.catalog import (
    FETCH_EMBEDDINGS,
    LIST_USER_FILES,
    default_registry,
)
from supavec_mcp.tools.validation import validate_arguments
from supavec_mcp.upstream.client import Failure
from supavec_mcp.upstream.models import EmbeddingsResponse, UserFilesResponse

if TYPE_CHECKING:
    from supavec_mcp.tools.base import ToolCall, ToolDescriptor
    from supavec_mcp.tools.registry import ToolRegistry
    from supavec_mcp.upstream.client import UpstreamClient

logger = logging.getLogger(__name__)

_Handler = Callable[[dict[str, Any]], Awaitable[ToolResult]]


class Dispatcher:
    """Stateless router from tool calls to upstream requests."""

    def __init__(
        self,
        client: UpstreamClient,
        registry: ToolRegistry | None = None,
    ) -> None:
        self._client = client
        self._registry = registry if registry is not None else default_registry()
        self._handlers: dict[str, _Handler] = {
            FETCH_EMBEDDINGS.name: self._fetch_embeddings,
            LIST_USER_FILES.name: self._list_user_files,
        }

    def list_catalogue(self) -> list[ToolDescriptor]:
        """Tools to advertise, in declaration order."""
        return [
            d for d in self._registry.list_descriptors() if d.name in self._handlers
        ]

    async def invoke(self, call: ToolCall) -> ToolResult:
        """Run a tool call.

        Raises:
            ToolNotFoundError: If the tool is not in the catalogue.
            InvalidArgumentsError: If the arguments fail validation.
        """
        handler = self._handlers.get(call.name)
        if handler is None:
            raise ToolNotFoundError(call.name)
        descriptor = self._registry.get(call.name)
        arguments = validate_arguments(descriptor, call.arguments)
        logger.info("Calling %s", call.name)
        return await handler(arguments)

    # ── Handlers ─────────────────────────────────────────────────

    async def _fetch_embeddings(self, args: dict[str, Any]) -> ToolResult:
        file_id = args["file_id"]
        outcome = await self._client.execute(
            "/embeddings",
            {"file_ids": [file_id], "query": args["query"]},
        )
        if isinstance(outcome, Failure):
            return ToolResult.text(
                f"Failed to retrieve embeddings for {file_id}: {outcome.message}"
            )

        try:
            embeddings = EmbeddingsResponse.model_validate(outcome.payload)
        except ValidationError:
            logger.warning("Unexpected /embeddings payload for %s", file_id)
            return ToolResult.text(
                f"Failed to retrieve embeddings for {file_id}: "
                "Unexpected response payload"
            )

        joined = "\n".join(d.content for d in embeddings.documents)
        return ToolResult(
            content=(
                ContentBlock(
                    text=json.dumps(joined, ensure_ascii=False),
                    mime_type=JSON_MIME_TYPE,
                ),
            )
        )

    async def _list_user_files(self, args: dict[str, Any]) -> ToolResult:
        outcome = await self._client.execute(
            "/user_files",
            {
                "pagination": {"limit": args["limit"], "offset": args["offset"]},
                "order_dir": args["order_dir"],
            },
        )
        if isinstance(outcome, Failure):
            return ToolResult.text(
                f"Failed to retrieve user files: {outcome.message}"
            )

        try:
            UserFilesResponse.model_validate(outcome.payload)
        except ValidationError as e:
            logger.debug(
                "/user_files payload does not match the documented shape: %s", e
            )
        return ToolResult.json(outcome.payload)
