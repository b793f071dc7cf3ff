# student_intake/core/errors.py
"""Error taxonomy for the intake service.

Store-level failures (``StoreError`` and friends) are raised by the
repository and never carry SQLAlchemy types upward. Request-level failures
(``IntakeError`` subclasses) carry the HTTP status and the public message;
the exception handler installed in ``create_app`` renders them as
``{"success": false, "message": ...}``.
"""


class StoreError(Exception):
    """Any failure reported by the record store."""


class UniqueViolation(StoreError):
    """An insert collided with a uniqueness constraint on ``field``."""

    def __init__(self, field: str):
        super().__init__(f"unique constraint violated on {field!r}")
        self.field = field


class IntakeError(Exception):
    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_payload(self) -> dict:
        return {"success": False, "message": self.message}


class MethodNotAllowed(IntakeError):
    status_code = 405
    message = "Method not allowed"


class BadRequest(IntakeError):
    status_code = 400
    message = "File upload error"


class DuplicateEmail(IntakeError):
    status_code = 400
    message = "A student with this email address has already submitted the form"


class InternalError(IntakeError):
    status_code = 500
    message = "Error submitting form"
