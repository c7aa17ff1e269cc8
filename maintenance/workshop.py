"""Workshop class for maintenance interval policy."""
from typing import Dict, Optional


class Workshop:
    """A workshop and the expected days between maintenance of its equipment."""

    def __init__(
            self,
            id: str,
            name: str,
            interval_days: int,
            task_intervals: Optional[Dict[str, int]] = None,
    ):
        self.id = id
        self.name = name
        self.interval_days = interval_days
        self.task_intervals = dict(task_intervals or {})

    def interval_for(self, task_id: Optional[str]) -> int:
        """Interval for a task, falling back to the workshop-wide interval."""
        if task_id is not None and task_id in self.task_intervals:
            return self.task_intervals[task_id]
        return self.interval_days
