"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class InvalidVoteTypeError(ValidationError):
    """Raised when a vote request carries something other than a VoteType."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid vote type: {value!r}")


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ThreadNotFoundError(NotFoundError):
    """Raised when a thread does not exist."""

    def __init__(self, identifier: str):
        super().__init__("Thread", identifier)


class ReplyNotFoundError(NotFoundError):
    """Raised when a reply does not exist within its thread."""

    def __init__(self, identifier: str):
        super().__init__("Reply", identifier)


class PersistenceError(DomainError):
    """Raised by repositories when the underlying store fails.

    The original storage exception is kept as __cause__.
    """

    pass
