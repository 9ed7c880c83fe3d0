"""
Domain exceptions.
"""


class DomainException(Exception):
    """Base exception for domain layer."""

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class NotFoundError(DomainException):
    """Raised when a referenced entity is not found."""

    def __init__(self, entity_name: str, entity_id: str, code: str = "NOT_FOUND"):
        super().__init__(
            message=f"{entity_name} '{entity_id}' not found",
            code=code
        )
        self.entity_name = entity_name
        self.entity_id = entity_id


class ValidationError(DomainException):
    """Raised when validation fails."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message=message, code="VALIDATION_ERROR")
        self.field = field


class UnauthenticatedError(DomainException):
    """Raised when no identity can be resolved for a request."""

    def __init__(self, message: str = "Authentication credentials were not provided"):
        super().__init__(message=message, code="UNAUTHENTICATED")


class DependencyError(DomainException):
    """Raised when a collaborator (database, catalog) is unreachable."""

    def __init__(self, dependency: str, message: str = None):
        super().__init__(
            message=message or f"{dependency} is unavailable",
            code="DEPENDENCY_UNAVAILABLE"
        )
        self.dependency = dependency
