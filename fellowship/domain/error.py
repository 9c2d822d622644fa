"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class PostNotFoundError(NotFoundError):
    """Raised when a comment targets a post that does not exist."""

    def __init__(self, identifier: str):
        super().__init__("post", identifier)


class ParentCommentNotFoundError(NotFoundError):
    """Raised when a reply targets a parent comment that does not exist."""

    def __init__(self, identifier: str):
        super().__init__("parent comment", identifier)


class ContentNotActiveError(DomainError):
    """Raised when acting on content that is deleted, hidden or reported."""

    def __init__(self, resource: str, identifier: str, status: str):
        self.resource = resource
        self.identifier = identifier
        self.status = status
        super().__init__(f"{resource} {identifier} is not active (status: {status})")


class PostNotActiveError(ContentNotActiveError):
    """Raised when commenting on a post that is not active."""

    def __init__(self, identifier: str, status: str):
        super().__init__("post", identifier, status)


class ParentCommentNotActiveError(ContentNotActiveError):
    """Raised when replying to a comment that is not active."""

    def __init__(self, identifier: str, status: str):
        super().__init__("parent comment", identifier, status)


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class MaxDepthExceededError(BusinessRuleViolationError):
    """Raised when a reply would nest deeper than the allowed depth."""

    def __init__(self, parent_id: str, max_depth: int):
        self.parent_id = parent_id
        self.max_depth = max_depth
        super().__init__(
            f"Cannot reply to comment {parent_id}: maximum depth is {max_depth}"
        )


class SelfReportForbiddenError(BusinessRuleViolationError):
    """Raised when a user attempts to report their own comment."""

    def __init__(self, comment_id: str):
        super().__init__(f"Cannot report your own comment {comment_id}")


class InvalidStatusTransitionError(BusinessRuleViolationError):
    """Raised when a moderation event is not allowed from the current status."""

    def __init__(self, current: str, event: str):
        self.current = current
        self.event = event
        super().__init__(f"Cannot apply {event} to a comment that is {current}")
