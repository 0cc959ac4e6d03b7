# Models exchanged with the remote document store
from enum import Enum
from pydantic import BaseModel
from typing import List


class Identity(BaseModel):
    id: str
    is_anonymous: bool = False


class PermissionAction(str, Enum):
    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class PermissionRole(str, Enum):
    ANY = "any"
    OWNER = "owner"  # the identity that created the document


class DocumentPermission(BaseModel):
    action: PermissionAction
    role: PermissionRole


class DocumentQuery(BaseModel):
    """Single-page listing: newest first on order_by_desc, at most limit rows"""
    order_by_desc: str
    limit: int


def public_read_owner_write() -> List[DocumentPermission]:
    """Readable by anyone, creatable/updatable/deletable only by the creator"""
    return [
        DocumentPermission(action=PermissionAction.READ, role=PermissionRole.ANY),
        DocumentPermission(action=PermissionAction.CREATE, role=PermissionRole.OWNER),
        DocumentPermission(action=PermissionAction.UPDATE, role=PermissionRole.OWNER),
        DocumentPermission(action=PermissionAction.DELETE, role=PermissionRole.OWNER),
    ]
