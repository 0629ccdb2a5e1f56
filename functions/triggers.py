from dispatches.maintain_status_sync import on_dispatch_updated
from firebase_functions import firestore_fn, scheduler_fn
from models.constants import CLEANUP_SCHEDULE, Collections, PathParams
from notifications.cleanup_old_notifications import cleanup_old_notifications
from utils.firestore_utils import get_db


# Firestore trigger for dispatch updates
@firestore_fn.on_document_updated(
    document=f"{Collections.DISPATCHES}/{{{PathParams.DISPATCH_ID}}}"
)
def maintain_status_sync(
    event: firestore_fn.Event[firestore_fn.Change[firestore_fn.DocumentSnapshot | None]],
) -> None:
    """
    Firestore trigger function that runs when a dispatch document is updated.

    Args:
        event: The Firestore event containing the before/after document snapshots

    Returns:
        None
    """
    return on_dispatch_updated(event)


# Scheduled cleanup of old notifications
@scheduler_fn.on_schedule(schedule=CLEANUP_SCHEDULE)
def cleanup_notifications(event: scheduler_fn.ScheduledEvent) -> None:
    cleanup_old_notifications(get_db())
