from typing import Any, Mapping, Optional


class NotFoundError(Exception):
    """Raised when a requested record does not exist.

    ``code`` and ``http_status`` drive the 404 response; ``details`` is echoed
    to JSON clients.
    """

    code = "NOT_FOUND"
    http_status = 404

    def __init__(self, message: str = "Not found", details: Optional[Mapping[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class RestrictedDeleteError(Exception):
    """Raised when a record cannot be deleted because dependent rows still reference it.

    The delete is vetoed before any SQL is issued; callers roll back the session
    and report ``message`` as a record-level error.
    """

    code = "DELETE_RESTRICTED"
    http_status = 409

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
