"""Goal model definitions."""
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class GoalPeriod(str, Enum):
    """Recurrence bucket a goal belongs to (one board column each)."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class GoalStatus(str, Enum):
    """Goal workflow stages."""

    PLANNED = "planned"
    TO_DO = "to-do"
    IN_PROGRESS = "in-progress"
    DONE = "done"
    ARCHIVED = "archived"


class GoalBase(BaseModel):
    """Base goal fields."""

    title: str
    description: str = ""
    period: GoalPeriod
    status: GoalStatus = GoalStatus.TO_DO
    progress: Optional[int] = Field(default=None, ge=0, le=100, strict=True)  # percent


class GoalCreate(GoalBase):
    """Goal creation model."""

    pass


class GoalUpdate(BaseModel):
    """Goal update model - all fields optional."""

    title: Optional[str] = None
    description: Optional[str] = None
    period: Optional[GoalPeriod] = None
    status: Optional[GoalStatus] = None
    progress: Optional[int] = Field(default=None, ge=0, le=100, strict=True)


class Goal(GoalBase):
    """
    Full goal model with identity fields.

    Every field except progress is required. Records written before
    progress tracking existed have no progress; they load with
    progress=None and serialize back without the key.
    """

    id: str = Field(min_length=1, frozen=True)
    description: str
    status: GoalStatus
    created_at: int = Field(alias="createdAt", ge=0, strict=True, frozen=True)  # epoch ms

    model_config = {
        "populate_by_name": True,
        "validate_assignment": True,
        "extra": "forbid",
    }

    @property
    def column_id(self) -> GoalPeriod:
        """Id of the column this goal is grouped under."""
        return self.period

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON-compatible wire form."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Goal":
        """Validate a wire record (with or without progress)."""
        return cls.model_validate(data)
