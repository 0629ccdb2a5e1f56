from typing import Dict, Optional

from firebase_admin import firestore
from google.api_core.exceptions import GoogleAPIError
from models.constants import (
    Collections,
    CurrentStatusFields,
    DispatchFields,
    NoOpReason,
)
from models.data_models import Correct, NoOp, ReconciliationDecision, SyncReport
from models.errors import StoreUnavailableError
from models.pydantic_models import DispatchStatusSnapshot
from utils.logging_utils import get_logger


def evaluate(record: Optional[Dict]) -> ReconciliationDecision:
    """
    Decide whether a dispatch's currentStatus mirror is stale.

    The mirror is stale when it is absent, has no status, or its status
    differs from the primary status. A stale mirror is replaced with the
    primary status, stamped with the dispatch's own updatedAt or, when that
    is missing, a server timestamp.

    This function performs no I/O.

    Args:
        record: The dispatch document data

    Returns:
        NoOp when nothing needs writing, otherwise Correct carrying the new mirror
    """
    snapshot = DispatchStatusSnapshot.model_validate(record or {})

    if snapshot.status is None:
        return NoOp(reason=NoOpReason.MISSING_STATUS)

    mirror = snapshot.current_status
    if mirror is not None and mirror.status == snapshot.status:
        return NoOp(reason=NoOpReason.IN_SYNC)

    return Correct(
        mirror={
            CurrentStatusFields.STATUS: snapshot.status,
            CurrentStatusFields.UPDATED_AT: snapshot.updated_at
            or firestore.SERVER_TIMESTAMP,
        }
    )


def corrective_update(record: Dict, decision: Correct) -> Dict:
    """
    Build the Firestore update for a corrective decision.

    An existing currentStatus map is patched field by field so any other keys
    it carries survive. A missing or malformed mirror is replaced outright.
    """
    if isinstance(record.get(DispatchFields.CURRENT_STATUS), dict):
        return {
            f"{DispatchFields.CURRENT_STATUS}.{field}": value
            for field, value in decision.mirror.items()
        }
    return {DispatchFields.CURRENT_STATUS: decision.mirror}


def _mirror_status(record: Dict):
    current_status = record.get(DispatchFields.CURRENT_STATUS)
    if isinstance(current_status, dict):
        return current_status.get(CurrentStatusFields.STATUS)
    return None


def reconcile_all(db: firestore.Client) -> SyncReport:
    """
    Bring every dispatch's currentStatus mirror in line with its status.

    All corrections go into a single write batch which is committed once,
    so either every stale mirror is fixed or none is.

    Args:
        db: Firestore client

    Returns:
        A SyncReport with the number of dispatches checked, updated and skipped

    Raises:
        StoreUnavailableError: The dispatches could not be read or the batch
            could not be committed
    """
    logger = get_logger(__name__)
    logger.info("Starting dispatch status synchronization")

    try:
        dispatch_docs = list(db.collection(Collections.DISPATCHES).stream())
    except GoogleAPIError as e:
        raise StoreUnavailableError("read", e) from e

    report = SyncReport(total_checked=len(dispatch_docs))
    batch = db.batch()

    for doc in dispatch_docs:
        data = doc.to_dict() or {}
        decision = evaluate(data)

        if isinstance(decision, NoOp):
            if decision.reason == NoOpReason.MISSING_STATUS:
                logger.warning(f"Dispatch {doc.id} has no status, skipping")
                report.skipped += 1
            continue

        logger.info(
            f"Syncing dispatch {doc.id}: status '{data.get(DispatchFields.STATUS)}' "
            f"!= currentStatus '{_mirror_status(data)}'"
        )
        batch.update(doc.reference, corrective_update(data, decision))
        report.updated += 1

    if report.updated == 0:
        logger.info("No synchronization needed - all statuses are already in sync")
        return report

    try:
        batch.commit()
    except GoogleAPIError as e:
        raise StoreUnavailableError("batch commit", e) from e

    logger.info(f"Successfully synchronized {report.updated} dispatch statuses")
    return report


def apply_status_change(
    dispatch_id: str,
    before: Optional[Dict],
    after: Optional[Dict],
    dispatch_ref,
) -> bool:
    """
    Re-sync a single dispatch's mirror after its primary status changed.

    Nothing is written unless the status differs between the two snapshots,
    so the trigger fired by our own corrective write is a no-op. Store
    failures are logged and dropped; the bulk sweep repairs anything missed.

    Args:
        dispatch_id: The dispatch document ID
        before: The document data before the update
        after: The document data after the update
        dispatch_ref: Reference to the dispatch document

    Returns:
        True if a corrective write was applied, False otherwise
    """
    logger = get_logger(__name__)

    if not after:
        logger.warning(f"Dispatch {dispatch_id} has no data after update")
        return False

    before_status = (before or {}).get(DispatchFields.STATUS)
    after_status = after.get(DispatchFields.STATUS)
    if before_status == after_status:
        return False

    decision = evaluate(after)
    if not isinstance(decision, Correct):
        return False

    logger.info(
        f"Auto-syncing status for dispatch {dispatch_id}: "
        f"'{before_status}' -> '{after_status}', currentStatus was '{_mirror_status(after)}'"
    )

    try:
        dispatch_ref.update(corrective_update(after, decision))
    except GoogleAPIError as e:
        logger.error(f"Failed to sync status for dispatch {dispatch_id}: {str(e)}")
        return False

    logger.info(
        f"Successfully synced status to '{after_status}' for dispatch {dispatch_id}"
    )
    return True
