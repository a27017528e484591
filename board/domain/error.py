"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class IdeaNotFoundError(NotFoundError):
    """Raised when voting on or fetching an idea that does not exist."""

    def __init__(self, idea_id: int):
        self.idea_id = idea_id
        super().__init__("Idea", str(idea_id))


class AuthenticationRequiredError(DomainError):
    """Raised when an anonymous identity attempts an authenticated-only action."""

    def __init__(self, action: str):
        super().__init__(f"Authentication required to {action}")


class NotAuthorizedError(DomainError):
    """Raised when an identity lacks the capability for an action."""

    def __init__(self, action: str, identity: str):
        super().__init__(f"{identity} is not authorized to {action}")


class StorageUnavailableError(DomainError):
    """Raised by a fingerprint store that cannot be read or written."""

    pass
