"""Service-layer errors.

Services raise these and never catch them; ``taskmanager.main`` turns them
into HTTP responses.
"""


class ServiceError(Exception):
    """Base exception for service layer errors."""

    status_code = 500

    def __init__(self, message: str, code: str = "SERVICE_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(message)


class NotFoundError(ServiceError):
    """Raised when an entity does not exist or is outside the caller's ownership chain.

    Both cases produce the same message so that existence is never leaked.
    """

    status_code = 404

    def __init__(self, entity_type: str, entity_id) -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(
            message=f"{entity_type} with id '{entity_id}' was not found.",
            code="NOT_FOUND",
        )


class ValidationError(ServiceError):
    """Raised when input violates a field constraint."""

    status_code = 400

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message=message, code="VALIDATION_ERROR")


class DuplicateError(ServiceError):
    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message=message, code="DUPLICATE")


class UnauthorizedError(ServiceError):
    status_code = 401

    def __init__(self, message: str) -> None:
        super().__init__(message=message, code="UNAUTHORIZED")
