"""
Sync API endpoints.

Provides the push endpoint offline clients use to replay queued mutations.
"""

from django.conf import settings
from django.http import HttpRequest
from ninja import Router
from ninja.errors import HttpError

from apps.core.logging import get_logger
from apps.core.security import BearerAuth, get_auth_context
from apps.sync.schemas import SyncPushRequest, SyncPushResponse
from apps.sync.services import process_batch, to_sync_push_response

logger = get_logger(__name__)

router = Router(tags=["sync"])
bearer_auth = BearerAuth()


@router.post(
    "/push",
    response=SyncPushResponse,
    auth=bearer_auth,
    summary="Push sync operations",
    description=(
        "Push a batch of offline operations from client to server. Returns 200 with a "
        "per-operation outcome whenever the batch was accepted, even if some operations "
        "failed or conflicted."
    ),
)
def sync_push(request: HttpRequest, payload: SyncPushRequest) -> SyncPushResponse:
    """
    Process a batch of sync operations.

    Each operation is processed independently. Results are returned in the same
    order as the input operations.
    """
    user, member, organization = get_auth_context(request)

    max_batch_size = getattr(settings, "SYNC_PUSH_MAX_BATCH_SIZE", 100)
    if len(payload.operations) > max_batch_size:
        raise HttpError(400, f"Maximum {max_batch_size} operations per batch")

    result = process_batch(
        organization=organization,
        actor=member,
        operations=payload.operations,
        client_timestamp=payload.client_timestamp,
    )

    logger.info(
        "sync_push_response",
        **{"usr.id": str(user.pk)},
        success=result.success,
        operation_count=len(payload.operations),
    )

    return to_sync_push_response(result)
