from dispatches.status_sync import reconcile_all
from firebase_admin import firestore
from flask import Request, Response
from models.errors import StoreUnavailableError
from utils.firestore_utils import get_db
from utils.json_utils import json_response
from utils.logging_utils import get_logger


def _failure_response(error: str) -> Response:
    return json_response(
        {
            "success": False,
            "message": "Failed to synchronize dispatch statuses",
            "error": error,
        },
        status=500,
    )


def sync_dispatch_statuses(
    request: Request, db: firestore.Client | None = None
) -> Response:
    """
    Run the bulk status sweep over every dispatch and report the outcome.

    Args:
        request: The Flask request object. The body is not used.
        db: Firestore client, the shared one when not provided

    Returns:
        A JSON response containing:
        - success, message
        - totalChecked: number of dispatches read
        - updated: number of mirrors corrected
        - errors: number of failed corrections (the batch is all-or-nothing)

        On any failure a 500 response with success, message and error.
    """
    logger = get_logger(__name__)
    logger.info(f"Dispatch status sync requested via {request.method}")

    try:
        report = reconcile_all(db or get_db())
    except StoreUnavailableError as e:
        logger.error(f"Error synchronizing dispatch statuses: {str(e)}")
        return _failure_response(str(e.cause))
    except Exception as e:
        # Client setup failures (credentials, project) land here
        logger.error(f"Unexpected error synchronizing dispatch statuses: {str(e)}")
        return _failure_response(str(e))

    logger.info(
        f"Dispatch status sync finished: checked {report.total_checked}, "
        f"updated {report.updated}, skipped {report.skipped}"
    )
    return json_response(report)
