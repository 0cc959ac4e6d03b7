from .remote_store import RemoteStore, RemoteStoreError, IdentityNotFoundError
from .supabase_client import SupabaseSearchStore

__all__ = [
    "RemoteStore",
    "RemoteStoreError",
    "IdentityNotFoundError",
    "SupabaseSearchStore",
]
