from typing import Any, Dict, List, Protocol

from moviesearch.models.store_models import DocumentPermission, DocumentQuery, Identity


class RemoteStoreError(Exception):
    """Raised by store adapters for failures not reported by the SDK itself"""


class IdentityNotFoundError(RemoteStoreError):
    """No authenticated identity is attached to the client"""


class RemoteStore(Protocol):
    """
    Operations the tracking services need from the hosted document store.

    Every method is a coroutine and may raise; callers are expected to catch
    and degrade.
    """

    async def get_current_identity(self) -> Identity:
        ...

    async def create_anonymous_identity(self) -> Identity:
        ...

    async def create_document(
        self,
        database_id: str,
        collection_id: str,
        document_id: str,
        payload: Dict[str, Any],
        permissions: List[DocumentPermission],
    ) -> Dict[str, Any]:
        ...

    async def list_documents(
        self,
        database_id: str,
        collection_id: str,
        query: DocumentQuery,
    ) -> List[Dict[str, Any]]:
        ...
