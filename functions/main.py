# This file re-exports the functions from endpoints.py and triggers.py
# to maintain compatibility with Firebase's expected structure

from firebase_admin import initialize_app

# Import and re-export the HTTP and callable functions
from endpoints import sync_dispatch_statuses, track_notification_click

# Import and re-export the Firestore and scheduled trigger functions
from triggers import cleanup_notifications, maintain_status_sync

# Initialize firebase_admin once per instance; handlers share its Firestore client
initialize_app()

# These exports allow Firebase to find the functions in their expected location
__all__ = [
    "sync_dispatch_statuses",
    "track_notification_click",
    "maintain_status_sync",
    "cleanup_notifications",
]
