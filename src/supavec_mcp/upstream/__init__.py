"""Supavec API client and payload models."""

from supavec_mcp.upstream.client import (
    Failure,
    Success,
    UpstreamClient,
    UpstreamOutcome,
)

__all__ = [
    "Failure",
    "Success",
    "UpstreamClient",
    "UpstreamOutcome",
]
