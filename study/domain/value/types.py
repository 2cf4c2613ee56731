"""Domain value objects for the study group service.

Value objects are immutable and defined by their values, not identity.
Category and status are closed enumerations; values read from the store that
fall outside them resolve to an explicit fallback member instead of failing.
"""

from enum import Enum

from pydantic import ConfigDict, RootModel, field_validator


class TopicCategory(str, Enum):
    """Subject area of a topic."""

    VIBE_CODING = "Vibe Coding"
    GAME_ENGINE = "Game Engine"
    MODELING_3D = "3D Modeling"
    UNCATEGORIZED = "Uncategorized"  # Fallback for null/unknown stored values

    @classmethod
    def parse(cls, value: "str | TopicCategory | None") -> "TopicCategory":
        """Resolve a stored value, falling back to UNCATEGORIZED."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNCATEGORIZED

    @classmethod
    def selectable(cls) -> list["TopicCategory"]:
        """Categories a user can pick when creating or editing a topic."""
        return [c for c in cls if c is not cls.UNCATEGORIZED]


class TopicStatus(str, Enum):
    """Progress of a topic."""

    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    DONE = "Done"

    @classmethod
    def parse(cls, value: "str | TopicStatus | None") -> "TopicStatus":
        """Resolve a stored value, falling back to NOT_STARTED."""
        try:
            return cls(value)
        except ValueError:
            return cls.NOT_STARTED


class TopicSortOrder(str, Enum):
    """Sort order for topic listings."""

    NEWEST = "newest"  # created_at DESC
    OLDEST = "oldest"  # created_at ASC
    TITLE_ASC = "az"
    TITLE_DESC = "za"


class WeekStart(str, Enum):
    """First column of a calendar grid."""

    SUNDAY = "sunday"
    MONDAY = "monday"

    @property
    def firstweekday(self) -> int:
        """Weekday number in the ``calendar`` module convention (Monday=0)."""
        return 6 if self is WeekStart.SUNDAY else 0


class ChangeKind(str, Enum):
    """Record kinds that emit change signals."""

    COMMENTS = "comments"
    TOPICS = "topics"


class ChangeAction(str, Enum):
    """Row-level change that triggered a signal."""

    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class Username(RootModel[str]):
    """Display name shown next to topics and comments."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.root

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not blank and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Username must be 1-50 characters")
        return v
