import asyncio
import logging
from typing import Any, Dict, List, Optional

from supabase import AsyncClient, acreate_client

from moviesearch.database.remote_store import IdentityNotFoundError
from moviesearch.models.store_models import (
    DocumentPermission,
    DocumentQuery,
    Identity,
    PermissionRole,
)

logger = logging.getLogger(__name__)


class SupabaseSearchStore:
    """
    Supabase implementation of the remote store.

    database_id maps to a Postgres schema and collection_id to a table in it.
    The async SDK client is created on first use and shared afterwards, so
    the anonymous session created by one call is seen by the next.

    Expected table columns: id, searchTerm, movieId, title, posterPath,
    voteAverage, createdAt, owner_id, permissions (text[]). Row level
    security policies read owner_id/permissions to enforce the grants.
    """

    def __init__(self, url: str, key: str, client: Optional[AsyncClient] = None):
        if not url or not key:
            raise ValueError("Supabase URL and project key are required to build a client")

        self.url = url
        self.key = key
        self._client: Optional[AsyncClient] = client
        self._client_lock = asyncio.Lock()

    async def _get_client(self) -> AsyncClient:
        if self._client is None:
            async with self._client_lock:
                if self._client is None:
                    self._client = await acreate_client(self.url, self.key)
                    logger.info("Supabase client initialized")
        return self._client

    async def get_current_identity(self) -> Identity:
        client = await self._get_client()
        response = await client.auth.get_user()

        if not response or not response.user:
            raise IdentityNotFoundError("No active session")

        return self._to_identity(response.user)

    async def create_anonymous_identity(self) -> Identity:
        client = await self._get_client()
        response = await client.auth.sign_in_anonymously()

        if not response or not response.user:
            raise IdentityNotFoundError("Anonymous sign-in returned no user")

        logger.info(f"Created anonymous session for user {response.user.id}")
        return self._to_identity(response.user)

    async def create_document(
        self,
        database_id: str,
        collection_id: str,
        document_id: str,
        payload: Dict[str, Any],
        permissions: List[DocumentPermission],
    ) -> Dict[str, Any]:
        client = await self._get_client()

        session = await client.auth.get_session()
        if not session or not session.user:
            raise IdentityNotFoundError("No active session; owner grants cannot be resolved")
        owner_id = str(session.user.id)

        row = {
            "id": document_id,
            **payload,
            "owner_id": owner_id,
            "permissions": [self._grant(p, owner_id) for p in permissions],
        }

        response = await client.schema(database_id).table(collection_id).insert(row).execute()

        if response.data:
            return response.data[0]
        return row

    async def list_documents(
        self,
        database_id: str,
        collection_id: str,
        query: DocumentQuery,
    ) -> List[Dict[str, Any]]:
        client = await self._get_client()

        response = await client.schema(database_id).table(collection_id).select("*").order(
            query.order_by_desc, desc=True
        ).limit(query.limit).execute()

        return response.data if response.data else []

    @staticmethod
    def _grant(permission: DocumentPermission, owner_id: str) -> str:
        """Render a grant as e.g. read("any") or update("user:<id>")"""
        if permission.role == PermissionRole.ANY:
            role = "any"
        else:
            role = f"user:{owner_id}"
        return f'{permission.action.value}("{role}")'

    @staticmethod
    def _to_identity(user: Any) -> Identity:
        return Identity(id=str(user.id), is_anonymous=bool(getattr(user, "is_anonymous", False)))
