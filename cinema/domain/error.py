"""Domain layer errors.

Every domain error carries a machine-readable ``key`` that the interface
layer returns to clients alongside the human message.
"""


class DomainError(Exception):
    """Base domain error."""

    key = "domainError"


class ValidationError(DomainError):
    """Domain validation error."""

    key = "validationError"


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    key = "unauthorized"

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found.

    The key is derived from the resource name, e.g. ``commentNotFound``.
    """

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        self.key = f"{resource[0].lower()}{resource[1:]}NotFound"
        super().__init__(f"{resource} not found: {identifier}")
