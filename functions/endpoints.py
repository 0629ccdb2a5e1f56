from dispatches.sync_dispatch_statuses import sync_dispatch_statuses as run_sync
from firebase_functions import https_fn
from notifications.track_notification_click import (
    track_notification_click as track_click,
)


@https_fn.on_request()
def sync_dispatch_statuses(req: https_fn.Request) -> https_fn.Response:
    """
    HTTP function that reconciles status and currentStatus on every dispatch.
    """
    return run_sync(req)


@https_fn.on_call()
def track_notification_click(req: https_fn.CallableRequest) -> dict:
    """
    Callable function that records a click on a customer notification.
    """
    return track_click(req.data).to_json()
