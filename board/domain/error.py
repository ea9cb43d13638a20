"""Domain layer errors.

Every failure raised by the business layer is one of these kinds. The HTTP
interface maps each kind to a status code at the boundary.
"""


class DomainError(Exception):
    """Base domain error."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Malformed or missing input field."""

    pass


class AuthenticationError(DomainError):
    """Missing, invalid or expired credential."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a verified caller may not act on a resource."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a write would break a uniqueness rule."""

    pass


class DataIntegrityError(DomainError):
    """Raised when stored rows reference data that no longer exists."""

    pass
