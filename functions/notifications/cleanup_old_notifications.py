from datetime import datetime, timedelta, timezone

from firebase_admin import firestore
from google.api_core.exceptions import GoogleAPIError
from models.constants import (
    MAX_BATCH_WRITES,
    NOTIFICATION_RETENTION_DAYS,
    Collections,
    NotificationFields,
    QueryOperators,
)
from models.data_models import CleanupReport
from utils.logging_utils import get_logger


def delete_old_notifications(
    db: firestore.Client, customer_id: str, cutoff: datetime
) -> int:
    """
    Delete one customer's notifications older than the cutoff.

    Deletes are committed in batches of at most MAX_BATCH_WRITES. A store
    failure stops this customer's cleanup; batches already committed stay
    counted.

    Args:
        db: Firestore client
        customer_id: The customer whose notifications to prune
        cutoff: Notifications with a timestamp before this are deleted

    Returns:
        The number of notifications actually deleted
    """
    logger = get_logger(__name__)
    old_notifications = (
        db.collection(Collections.CUSTOMERS)
        .document(customer_id)
        .collection(Collections.NOTIFICATIONS)
        .where(NotificationFields.TIMESTAMP, QueryOperators.LESS_THAN, cutoff)
        .stream()
    )

    deleted = 0
    batch = db.batch()
    pending = 0
    try:
        for notification_doc in old_notifications:
            batch.delete(notification_doc.reference)
            pending += 1
            if pending == MAX_BATCH_WRITES:
                batch.commit()
                deleted += pending
                batch = db.batch()
                pending = 0

        if pending:
            batch.commit()
            deleted += pending
    except GoogleAPIError as e:
        logger.error(
            f"Error cleaning up notifications for customer {customer_id} "
            f"after {deleted} deletions: {str(e)}"
        )

    return deleted


def cleanup_old_notifications(
    db: firestore.Client, now: datetime | None = None
) -> CleanupReport:
    """
    Delete every customer's notifications older than the retention window.

    Failures are logged rather than raised. A customer whose notifications
    cannot be pruned is skipped; the next scheduled run picks them up.

    Args:
        db: Firestore client
        now: The current time, defaults to the current UTC time

    Returns:
        A CleanupReport with the customers visited and notifications deleted
    """
    logger = get_logger(__name__)
    logger.info("Starting cleanup of old notifications")

    now = now or datetime.now(timezone.utc)
    cutoff = now - timedelta(days=NOTIFICATION_RETENTION_DAYS)
    report = CleanupReport()

    try:
        customer_docs = list(db.collection(Collections.CUSTOMERS).stream())
    except GoogleAPIError as e:
        logger.error(f"Error listing customers for notification cleanup: {str(e)}")
        return report

    for customer_doc in customer_docs:
        report.customers_checked += 1
        deleted = delete_old_notifications(db, customer_doc.id, cutoff)
        if deleted:
            logger.info(
                f"Deleted {deleted} old notifications for customer {customer_doc.id}"
            )
        report.deleted += deleted

    logger.info(f"Cleaned up {report.deleted} old notifications")
    return report
