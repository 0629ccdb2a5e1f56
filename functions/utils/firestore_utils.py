import firebase_admin
from firebase_admin import firestore

_db = None


def get_db() -> firestore.Client:
    """
    Return the process-wide Firestore client.

    The client is created on first use and shared by every function running
    in the same instance. firebase_admin is initialized here if main.py has
    not done so already (e.g. when a handler module is imported directly).
    """
    global _db
    if _db is None:
        if not firebase_admin._apps:
            firebase_admin.initialize_app()
        _db = firestore.client()
    return _db
