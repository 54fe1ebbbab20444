"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class SelfVoteError(ValidationError):
    """Raised when a user votes on their own content."""

    def __init__(self, resource: str, resource_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"Cannot vote on your own {resource}")


class InvalidVoteDirectionError(ValidationError):
    """Raised when a vote direction token is not recognised."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid vote direction: {token!r}")


class ConcurrencyConflictError(DomainError):
    """Raised when an optimistic write keeps losing to concurrent writers.

    Transient: the caller may retry the whole request.
    """

    def __init__(self, resource: str, resource_id: str, attempts: int):
        self.resource = resource
        self.resource_id = resource_id
        self.attempts = attempts
        super().__init__(
            f"Concurrent updates on {resource} {resource_id}, "
            f"gave up after {attempts} attempts"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class CommunityNameTakenError(ValidationError):
    """Raised when creating a community whose name is already in use."""

    def __init__(self, name: str):
        self.name = name
        super().__init__("Community name already exists")


class MembershipError(ValidationError):
    """Raised when a join or leave doesn't apply to the user's membership."""

    pass
