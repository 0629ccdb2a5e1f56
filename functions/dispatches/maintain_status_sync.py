from dispatches.status_sync import apply_status_change
from models.constants import PathParams
from utils.logging_utils import get_logger


def on_dispatch_updated(event) -> None:
    """
    Keep currentStatus in step with status whenever a dispatch is updated.

    Args:
        event: The Firestore event whose data is a Change with before/after snapshots

    Returns:
        None
    """
    logger = get_logger(__name__)

    dispatch_id = event.params.get(PathParams.DISPATCH_ID, "unknown")
    change = event.data
    if change is None:
        logger.warning(f"Update event for dispatch {dispatch_id} carried no data")
        return

    before = change.before.to_dict() if change.before else None
    after = change.after.to_dict() if change.after else None
    dispatch_ref = change.after.reference if change.after else None

    apply_status_change(dispatch_id, before, after, dispatch_ref)
