"""Pydantic models for Supavec API payloads."""

from __future__ import annotations

from pydantic import BaseModel


class Document(BaseModel):
    """A matched chunk from ``POST /embeddings``."""

    content: str


class EmbeddingsResponse(BaseModel):
    """Response body of ``POST /embeddings``."""

    documents: list[Document]


class Pagination(BaseModel):
    limit: int = 10
    offset: int = 0


class UserFile(BaseModel):
    file_id: str
    file_name: str
    type: str
    created_at: str
    team_id: str


class UserFilesResponse(BaseModel):
    """Response body of ``POST /user_files``.

    ``list-user-files`` passes this payload through verbatim; a mismatch
    with this shape is only logged at debug level.
    """

    success: bool
    results: list[UserFile]
    pagination: Pagination
    count: int
