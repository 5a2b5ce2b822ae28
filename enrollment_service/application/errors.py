class ServiceError(Exception):
    """Base for failures that map onto an HTTP status and a JSON envelope."""
    status_code = 500
    message = "Something is wrong, please try again"

    def __init__(self, message: str | None = None, error=None):
        self.message = message or self.message
        self.error = error
        super().__init__(self.message)


class ValidationFailed(ServiceError):
    status_code = 400
    message = "Validation failed"


class Unauthenticated(ServiceError):
    status_code = 401
    message = "Invalid or missing token"


class Forbidden(ServiceError):
    status_code = 403
    message = "Forbidden access"


class NotFound(ServiceError):
    status_code = 404
    message = "Resource not found"


class Conflict(ServiceError):
    status_code = 409
    message = "Resource already exists"
