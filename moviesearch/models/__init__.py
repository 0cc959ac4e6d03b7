# Search event models
from .search_event_models import SearchEvent, TrendingEntry, identifier_or_none, numeric_or_none, text_or_none

# Remote store models
from .store_models import (
    Identity,
    DocumentPermission,
    DocumentQuery,
    PermissionAction,
    PermissionRole,
    public_read_owner_write,
)

# Operation results
from .result_models import FailureKind, OperationFailure, OperationResult

# Request/Response models
from .request_models import *
from .response_models import *

__all__ = [
    "SearchEvent",
    "TrendingEntry",
    "numeric_or_none",
    "identifier_or_none",
    "text_or_none",
    "Identity",
    "DocumentPermission",
    "DocumentQuery",
    "PermissionAction",
    "PermissionRole",
    "public_read_owner_write",
    "FailureKind",
    "OperationFailure",
    "OperationResult",
    "SearchEventRequest",
    "AcceptedResponse",
    "TrendingResponse",
    "HealthResponse",
]
