"""Error taxonomy shared by services, the store and the HTTP layer.

Each error carries the HTTP status and the machine readable code rendered by
the exception handlers in ``app.main``. Messages are for logs only and are
never sent to clients.
"""


class AppError(Exception):
    status_code: int = 500
    code: str | None = None

    def __init__(self, message: str = ""):
        super().__init__(message or self.__class__.__name__)


class ValidationError(AppError):
    status_code = 400
    code = "missing_fields"

    def __init__(self, message: str = "", fields: list[str] | None = None):
        super().__init__(message)
        self.fields = fields or []


class AuthError(AppError):
    status_code = 401


class NotFoundError(AppError):
    status_code = 404


class StoreError(AppError):
    status_code = 500
    code = "db_error"


class DuplicateKeyError(StoreError):
    """Unique constraint hit on insert. Only event ingestion handles it."""
