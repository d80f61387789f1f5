"""Board service - business logic for the goal collection and its columns."""
import logging
from typing import Any, Iterable, Optional, Union

from goalboard.config import Settings
from goalboard.models.column import Column, default_columns
from goalboard.models.goal import Goal, GoalCreate, GoalPeriod, GoalStatus, GoalUpdate
from goalboard.utils.ids import current_timestamp, generate_goal_id

logger = logging.getLogger(__name__)


class BoardService:
    """Service for handling goal board operations."""

    def __init__(
        self,
        columns: Optional[Iterable[Column]] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the board with its columns and an empty goal collection.

        Args:
            columns: Board columns; defaults to one per period with configured titles
            settings: Settings used to build default columns

        Raises:
            ValueError: If columns don't cover every period exactly once
        """
        if columns is None:
            columns = default_columns(settings)

        by_period: dict[GoalPeriod, Column] = {}
        for column in columns:
            if column.id in by_period:
                raise ValueError(f"Duplicate column: {column.id.value}")
            by_period[column.id] = column

        missing = [period.value for period in GoalPeriod if period not in by_period]
        if missing:
            raise ValueError(f"Missing columns: {', '.join(missing)}")

        self.columns = {period: by_period[period] for period in GoalPeriod}
        self.goals: dict[str, Goal] = {}

    def _get_existing(self, goal_id: str) -> Goal:
        goal = self.goals.get(goal_id)
        if goal is None:
            raise ValueError("Goal not found")
        return goal

    def create_goal(self, goal_create: GoalCreate) -> Goal:
        """
        Create a new goal with a fresh id and creation timestamp.

        Args:
            goal_create: Goal creation data

        Returns:
            Created goal object
        """
        goal = Goal(
            id=generate_goal_id(),
            created_at=current_timestamp(),
            **goal_create.model_dump(),
        )
        self.add_goal(goal)
        logger.info(f"Goal created: {goal.id} ({goal.period.value})")
        return goal

    def add_goal(self, goal: Goal) -> Goal:
        """
        Add an existing goal to the board.

        Args:
            goal: Fully built goal

        Returns:
            The stored goal

        Raises:
            ValueError: If a goal with the same id is already on the board
        """
        if goal.id in self.goals:
            logger.warning(f"Rejected duplicate goal id: {goal.id}")
            raise ValueError(f"Goal id already exists: {goal.id}")

        self.goals[goal.id] = goal
        return goal

    def load_goals(self, records: Iterable[dict[str, Any]]) -> list[Goal]:
        """
        Load goals from wire records.

        The batch is validated as a whole; nothing is stored if any record
        is invalid or any id repeats.

        Args:
            records: Goal dicts, with or without a progress key

        Returns:
            Loaded goals in input order

        Raises:
            pydantic.ValidationError: If a record is malformed
            ValueError: If an id repeats in the batch or is already on the board
        """
        goals = [Goal.from_dict(record) for record in records]

        seen: set[str] = set()
        for goal in goals:
            if goal.id in seen or goal.id in self.goals:
                raise ValueError(f"Goal id already exists: {goal.id}")
            seen.add(goal.id)

        for goal in goals:
            self.goals[goal.id] = goal

        logger.info(f"Loaded {len(goals)} goals")
        return goals

    def export_goals(self) -> list[dict[str, Any]]:
        """Serialize every goal on the board to its wire form."""
        return [goal.to_dict() for goal in self.goals.values()]

    def get_goal(self, goal_id: str) -> Goal:
        """
        Get a single goal by id.

        Raises:
            ValueError: If goal not found
        """
        return self._get_existing(goal_id)

    def list_goals(
        self,
        period: Optional[Union[GoalPeriod, str]] = None,
        status: Optional[Union[GoalStatus, str]] = None,
        include_archived: bool = True,
    ) -> list[Goal]:
        """
        List goals with optional filtering.

        Args:
            period: Optional period filter
            status: Optional status filter
            include_archived: If False, archived goals are skipped

        Returns:
            Matching goals in insertion order
        """
        period = GoalPeriod(period) if period is not None else None
        status = GoalStatus(status) if status is not None else None

        goals = []
        for goal in self.goals.values():
            if period and goal.period != period:
                continue
            if status and goal.status != status:
                continue
            if not include_archived and goal.status == GoalStatus.ARCHIVED:
                continue
            goals.append(goal)
        return goals

    def update_goal(self, goal_id: str, goal_update: GoalUpdate) -> Goal:
        """
        Update the fields set on goal_update.

        The merged goal is validated before anything is assigned, so a
        rejected update leaves the goal untouched.

        Args:
            goal_id: Goal id
            goal_update: Update data

        Returns:
            Updated goal

        Raises:
            ValueError: If goal not found
            pydantic.ValidationError: If the merged goal is invalid
        """
        goal = self._get_existing(goal_id)
        changes = goal_update.model_dump(exclude_unset=True)

        candidate = Goal.model_validate({**goal.model_dump(), **changes})
        for field in changes:
            setattr(goal, field, getattr(candidate, field))

        return goal

    def set_status(self, goal_id: str, status: Union[GoalStatus, str]) -> Goal:
        """Move a goal to another workflow stage. Any stage may follow any other."""
        goal = self._get_existing(goal_id)
        goal.status = status
        return goal

    def set_progress(self, goal_id: str, progress: Optional[int]) -> Goal:
        """Set (or clear, with None) a goal's completion percentage."""
        goal = self._get_existing(goal_id)
        goal.progress = progress
        return goal

    def archive_goal(self, goal_id: str) -> Goal:
        """Mark a goal archived."""
        return self.set_status(goal_id, GoalStatus.ARCHIVED)

    def delete_goal(self, goal_id: str) -> dict:
        """
        Remove a goal from the board.

        Returns:
            Dictionary with deleted_count

        Raises:
            ValueError: If goal not found
        """
        self._get_existing(goal_id)
        del self.goals[goal_id]
        logger.info(f"Goal deleted: {goal_id}")
        return {"deleted_count": 1}

    def get_column(self, period: Union[GoalPeriod, str]) -> Column:
        """Get the column for a period."""
        return self.columns[GoalPeriod(period)]

    def column_for_goal(self, goal_id: str) -> Column:
        """Get the column a goal is grouped under."""
        return self.get_column(self._get_existing(goal_id).column_id)

    def goals_by_column(self, include_archived: bool = True) -> dict[GoalPeriod, list[Goal]]:
        """
        Group goals under their columns.

        Returns:
            Dict keyed by column id in weekly, monthly, yearly order;
            every column is present, possibly with an empty list
        """
        grouped: dict[GoalPeriod, list[Goal]] = {period: [] for period in self.columns}
        for goal in self.list_goals(include_archived=include_archived):
            grouped[goal.column_id].append(goal)
        return grouped

    def check_consistency(self, goals: Optional[Iterable[Goal]] = None) -> None:
        """
        Verify goal ids are unique.

        Every goal period always matches a column: the board holds one
        column per GoalPeriod and Goal.period only takes GoalPeriod values.

        Args:
            goals: Goals to check; defaults to the goals on the board

        Raises:
            ValueError: On the first duplicate id
        """
        if goals is None:
            goals = self.goals.values()

        seen: set[str] = set()
        for goal in goals:
            if goal.id in seen:
                raise ValueError(f"Duplicate goal id: {goal.id}")
            seen.add(goal.id)
