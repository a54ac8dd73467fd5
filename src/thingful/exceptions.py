"""
Request-level errors.

Every error carries the HTTP status and the message that ends up in the
`{"error": message}` JSON body. The API registers one handler for the base
class (see thingful.api.errors), so routes and dependencies simply raise.
"""


class ThingfulError(Exception):
    """Base class for errors returned to API callers."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingToken(ThingfulError):
    """No `basic` authorization header on a protected route."""

    status_code = 401
    message = "Missing basic token"


class Unauthorized(ThingfulError):
    """Credentials were present but empty, unknown, or wrong."""

    status_code = 401
    message = "Unauthorized request"


class NotFound(ThingfulError):
    status_code = 404
    message = "Not found"


class ValidationError(ThingfulError):
    status_code = 400
    message = "Invalid request"


class DatabaseUnavailable(ThingfulError):
    status_code = 503
    message = "Database not enabled"
