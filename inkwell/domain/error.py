"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class InvalidStateError(DomainError):
    """Raised when an action violates a business rule.

    Examples: commenting on an unpublished post, replying to a comment
    that belongs to another post.
    """

    def __init__(self, message: str):
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when a user attempts an action on content they may not touch."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
