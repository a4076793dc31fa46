# pawpost/core/errors.py


class PawPostError(Exception):
    """Base error. `detail` goes to the client, str(exc) goes to the log."""

    status_code = 500
    detail = "Internal server error"

    def __init__(self, message: str = None, detail: str = None):
        if detail is not None:
            self.detail = detail
        super().__init__(message or self.detail)


class ValidationError(PawPostError):
    status_code = 400
    detail = "Invalid request"


class ForeignKeyViolation(ValidationError):
    detail = "User does not exist"


class Unauthorized(PawPostError):
    status_code = 401
    detail = "Invalid credentials"


class Forbidden(PawPostError):
    status_code = 403
    detail = "Not allowed to modify this post"


class NotFound(PawPostError):
    status_code = 404
    detail = "Not found"


class Conflict(PawPostError):
    status_code = 409
    detail = "Conflict"


class DuplicateEmail(Conflict):
    detail = "Email already registered"


class StoreError(PawPostError):
    detail = "Database error"


class MalformedHashError(PawPostError):
    detail = "Stored credentials are corrupt"


class InvalidPassword(ValidationError):
    detail = "Password contains unsupported characters"
