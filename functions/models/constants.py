from enum import StrEnum

# Constants for batched writes
MAX_BATCH_WRITES = 500

# Notification retention
NOTIFICATION_RETENTION_DAYS = 30
CLEANUP_SCHEDULE = "0 2 * * *"  # Daily at 2 AM


# Collection names
class Collections(StrEnum):
    DISPATCHES = "dispatches"
    CUSTOMERS = "customers"
    NOTIFICATIONS = "notifications"


# Path parameters for Firestore triggers
class PathParams(StrEnum):
    DISPATCH_ID = "dispatchId"


# Field names for Dispatch documents
class DispatchFields(StrEnum):
    STATUS = "status"
    CURRENT_STATUS = "currentStatus"
    UPDATED_AT = "updatedAt"


# Field names for the nested currentStatus map on Dispatch documents
class CurrentStatusFields(StrEnum):
    STATUS = "status"
    UPDATED_AT = "updatedAt"


# Field names for Notification documents
class NotificationFields(StrEnum):
    TIMESTAMP = "timestamp"
    CLICKED = "clicked"
    CLICKED_AT = "clickedAt"


# Reasons a dispatch needs no corrective write
class NoOpReason(StrEnum):
    IN_SYNC = "in_sync"
    MISSING_STATUS = "missing_status"


class QueryOperators(StrEnum):
    LESS_THAN = "<"
    EQUALS = "=="
