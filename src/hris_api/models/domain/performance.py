"""Performance domain enums."""

from enum import StrEnum


class GoalStatus(StrEnum):
    """Performance goal status."""

    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    CANCELED = "Canceled"
