"""Column model definitions."""
from typing import Optional

from pydantic import BaseModel

from goalboard.config import Settings, settings as default_settings
from goalboard.models.goal import GoalPeriod


class Column(BaseModel):
    """Board column grouping goals of one period."""

    id: GoalPeriod
    title: str

    model_config = {"frozen": True}


def default_columns(settings: Optional[Settings] = None) -> list[Column]:
    """
    Build the three board columns in weekly, monthly, yearly order.

    Args:
        settings: Settings supplying column titles (defaults to global settings)

    Returns:
        One column per GoalPeriod
    """
    titles = (settings or default_settings).column_titles
    return [Column(id=period, title=titles[period.value]) for period in GoalPeriod]
