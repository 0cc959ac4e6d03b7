"""Pytest configuration and shared fixtures."""
import asyncio

import pytest
from typing import Any, Dict, List, Optional

from moviesearch.config import Settings
from moviesearch.models.store_models import DocumentPermission, DocumentQuery, Identity
from moviesearch.services.context import TrackingContext


class FakeStore:
    """In-memory RemoteStore that records calls and can be told to fail."""

    def __init__(self, documents: Optional[List[Dict[str, Any]]] = None):
        self.documents: List[Dict[str, Any]] = list(documents or [])
        self.identity: Optional[Identity] = None
        self.created: List[Dict[str, Any]] = []
        self.queries: List[DocumentQuery] = []
        self.calls: List[str] = []
        self.fail_get_identity = False
        self.fail_create_identity = False
        self.fail_create_document = False
        self.fail_list_documents = False

    async def get_current_identity(self) -> Identity:
        self.calls.append("get_current_identity")
        if self.fail_get_identity or self.identity is None:
            raise RuntimeError("no session")
        return self.identity

    async def create_anonymous_identity(self) -> Identity:
        self.calls.append("create_anonymous_identity")
        if self.fail_create_identity:
            raise RuntimeError("anonymous sign-in disabled")
        self.identity = Identity(id="anon-1", is_anonymous=True)
        return self.identity

    async def create_document(self, database_id, collection_id, document_id, payload, permissions: List[DocumentPermission]):
        self.calls.append("create_document")
        await asyncio.sleep(0)
        if self.fail_create_document:
            raise RuntimeError("permission denied")
        # Newest first, like the createdAt-descending listing
        self.documents.insert(0, dict(payload))
        self.created.append({
            "database_id": database_id,
            "collection_id": collection_id,
            "document_id": document_id,
            "payload": payload,
            "permissions": permissions,
        })
        return {"id": document_id, **payload}

    async def list_documents(self, database_id, collection_id, query: DocumentQuery):
        self.calls.append("list_documents")
        if self.fail_list_documents:
            raise RuntimeError("network unreachable")
        self.queries.append(query)
        return self.documents[:query.limit]


@pytest.fixture
def settings():
    return Settings(
        endpoint="https://example.supabase.co",
        project_key="anon-key",
        database_id="public",
        collection_id="search_events",
    )


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def ctx(settings, store):
    return TrackingContext(settings, store)


@pytest.fixture
def disabled_ctx():
    return TrackingContext(Settings())


@pytest.fixture
def make_ctx(settings):
    def _make(documents=None):
        return TrackingContext(settings, FakeStore(documents))
    return _make
