from typing import Any

from firebase_admin import firestore
from models.constants import Collections, NotificationFields
from models.data_models import CallableResult
from models.pydantic_models import TrackNotificationClickRequest
from pydantic import ValidationError
from utils.firestore_utils import get_db
from utils.logging_utils import get_logger


def track_notification_click(
    data: Any, db: firestore.Client | None = None
) -> CallableResult:
    """
    Mark a customer's notification as clicked.

    Args:
        data: The callable payload containing notificationId and userId
        db: Firestore client, the shared one when not provided

    Returns:
        A CallableResult. Missing parameters and store failures are reported
        with success set to False rather than raised.
    """
    logger = get_logger(__name__)

    try:
        params = TrackNotificationClickRequest.model_validate(
            data if isinstance(data, dict) else {}
        )
    except ValidationError:
        params = None

    if params is None or not params.notification_id or not params.user_id:
        logger.warning(f"Notification click missing required parameters: {data}")
        return CallableResult(success=False, message="Missing required parameters")

    try:
        notification_ref = (
            (db or get_db())
            .collection(Collections.CUSTOMERS)
            .document(params.user_id)
            .collection(Collections.NOTIFICATIONS)
            .document(params.notification_id)
        )
        notification_ref.update(
            {
                NotificationFields.CLICKED: True,
                NotificationFields.CLICKED_AT: firestore.SERVER_TIMESTAMP,
            }
        )
    except Exception as e:
        logger.error(
            f"Error tracking click on notification {params.notification_id} "
            f"for user {params.user_id}: {str(e)}"
        )
        return CallableResult(success=False, message=str(e))

    logger.info(
        f"Notification clicked: {params.notification_id} by user: {params.user_id}"
    )
    return CallableResult(success=True, message="Click tracked successfully")
