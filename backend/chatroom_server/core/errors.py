# chatroom_server/core/errors.py
"""
Error taxonomy shared by the store adapters and the HTTP layer.

Every error carries the HTTP status it maps to and a short machine-readable
code. Routers never build error responses themselves; they let these
exceptions propagate to the handler installed in `chatroom_server.main`.
"""


class AppError(Exception):
    """Base class for errors that map onto a client-facing HTTP response."""

    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code

    def to_detail(self) -> dict:
        return {"code": self.code, "message": self.message}


class ValidationError(AppError):
    """Missing or malformed fields in a request body."""

    status_code = 400
    code = "BAD_REQUEST"


class ConflictError(ValidationError):
    """A unique key (username, email) is already taken."""

    status_code = 409
    code = "CONFLICT"


class AuthError(AppError):
    """Missing or incorrect embedded credentials."""

    status_code = 401
    code = "AUTH_INVALID_CREDENTIALS"


class NotFoundError(AppError):
    status_code = 404
    code = "NOT_FOUND"


class StoreError(AppError):
    """The underlying store is unreachable or an operation failed."""

    status_code = 500
    code = "STORE_ERROR"
