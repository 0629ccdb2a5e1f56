class StoreUnavailableError(Exception):
    """Raised when Firestore cannot be read from or written to."""

    def __init__(self, operation: str, cause: Exception):
        super().__init__(f"Firestore {operation} failed: {cause}")
        self.operation = operation
        self.cause = cause
