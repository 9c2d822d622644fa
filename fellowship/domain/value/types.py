"""Domain value objects for Fellowship.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from fellowship.domain.value.common import ValueObject
from fellowship.domain.value.identifiers import UserId


class CommentStatus(str, Enum):
    """Moderation status of a comment.

    Only ACTIVE comments are counted and listed. The other three states
    are terminal as far as the discussion engine is concerned.
    """

    ACTIVE = "active"
    HIDDEN = "hidden"
    DELETED = "deleted"
    REPORTED = "reported"


class PostStatus(str, Enum):
    """Status of a post owned by the post aggregate."""

    ACTIVE = "active"
    CLOSED = "closed"
    HIDDEN = "hidden"
    DELETED = "deleted"


class Role(str, Enum):
    """Role carried by an authenticated principal."""

    USER = "user"
    VOLUNTEER = "volunteer"
    ADMIN = "admin"


class ReportReason(str, Enum):
    """Reason a user gives when reporting a comment."""

    SPAM = "spam"
    ABUSE = "abuse"
    INAPPROPRIATE = "inappropriate"
    HARASSMENT = "harassment"
    OTHER = "other"


class Language(str, Enum):
    """Language a comment is written in."""

    KOREAN = "korean"
    ENGLISH = "english"
    TAGALOG = "tagalog"
    VIETNAMESE = "vietnamese"
    THAI = "thai"
    INDONESIAN = "indonesian"
    BURMESE = "burmese"
    KHMER = "khmer"
    LAO = "lao"
    BENGALI = "bengali"
    URDU = "urdu"
    NEPALI = "nepali"
    SINHALA = "sinhala"
    UZBEK = "uzbek"
    KAZAKH = "kazakh"
    MONGOLIAN = "mongolian"
    CHINESE = "chinese"
    JAPANESE = "japanese"
    MIXED = "mixed"


class Principal(ValueObject):
    """Authenticated actor supplied by the identity layer.

    Admins bypass ownership checks everywhere.
    """

    id: UserId
    role: Role = Role.USER

    @property
    def is_admin(self) -> bool:
        """Whether this principal has the admin capability."""
        return self.role == Role.ADMIN

    def can_manage(self, author_id: UserId) -> bool:
        """Whether this principal may edit or delete content by author_id."""
        return self.is_admin or self.id == author_id


class LikeState(ValueObject):
    """Result of a like toggle, as seen by the acting user."""

    is_liked: bool
    like_count: int


class ReportOutcome(ValueObject):
    """Result of a report attempt.

    recorded is False when the user had already reported the comment.
    """

    status: CommentStatus
    report_count: int
    recorded: bool
