import logging

from moviesearch.models.result_models import FailureKind, OperationResult
from moviesearch.models.store_models import Identity
from moviesearch.services.context import TrackingContext

logger = logging.getLogger(__name__)


async def ensure_session(ctx: TrackingContext) -> "OperationResult[Identity]":
    """
    Make sure an identity exists before any write.

    Reuses the current identity when there is one, otherwise signs in
    anonymously. Best effort: failures are logged and reported in the
    result, never raised.
    """
    if not ctx.enabled:
        return OperationResult.failed(FailureKind.NOT_CONFIGURED, "Search tracking is not configured")

    try:
        identity = await ctx.store.get_current_identity()
        return OperationResult.success(identity)
    except Exception as e:
        # Any failure (no session, expired token, network) falls through to anonymous sign-in
        logger.debug(f"No current identity, creating anonymous session: {str(e)}")

    try:
        identity = await ctx.store.create_anonymous_identity()
        return OperationResult.success(identity)
    except Exception as e:
        logger.warning(f"Failed to create anonymous session: {str(e)}")
        return OperationResult.failed(FailureKind.REMOTE_ERROR, str(e))
