"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""


class NotFoundError(DomainError):
    """A referenced topic, comment, attachment or profile does not exist."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """The caller does not own the record they tried to change."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.user_id = user_id
        super().__init__(f"{resource} {resource_id} is not owned by user {user_id}")


class InvalidUploadError(DomainError):
    """An upload was refused before reaching the object store.

    ``too_large`` separates size rejections from unsupported file types.
    """

    def __init__(self, reason: str, too_large: bool = False):
        self.reason = reason
        self.too_large = too_large
        super().__init__(reason)
