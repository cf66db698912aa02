"""Task service"""

from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional
from taskboard.schemas.task import Task, TaskPriority, TaskStats, TaskStatus


def _as_utc(value: datetime) -> datetime:
    # Les dates naïves sont considérées comme UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _now(now: Optional[datetime]) -> datetime:
    return _as_utc(now) if now is not None else datetime.now(timezone.utc)


def is_overdue(task: Task, now: datetime) -> bool:
    return _as_utc(task.due_date) < now and task.status != TaskStatus.COMPLETED


def compute_stats(tasks: Iterable[Task], now: Optional[datetime] = None) -> TaskStats:
    now = _now(now)
    tasks = list(tasks)
    completed = sum(1 for t in tasks if t.status == TaskStatus.COMPLETED)
    return TaskStats(
        total=len(tasks),
        completed=completed,
        pending=len(tasks) - completed,
        overdue=sum(1 for t in tasks if is_overdue(t, now)),
    )


def get_overdue_tasks(tasks: Iterable[Task], now: Optional[datetime] = None) -> List[Task]:
    now = _now(now)
    return [t for t in tasks if is_overdue(t, now)]


def get_today_tasks(tasks: Iterable[Task], now: Optional[datetime] = None) -> List[Task]:
    now = _now(now)
    day_start = datetime.combine(now.date(), datetime.min.time(), tzinfo=now.tzinfo)
    day_end = day_start + timedelta(days=1)

    return [t for t in tasks if day_start <= _as_utc(t.due_date) < day_end]


def get_this_week_tasks(tasks: Iterable[Task], now: Optional[datetime] = None) -> List[Task]:
    now = _now(now)
    today = now.date()
    days_until_end = (6 - today.weekday()) % 7
    if days_until_end == 0:
        days_until_end = 7

    week_end = today + timedelta(days=days_until_end)
    day_start = datetime.combine(today, datetime.min.time(), tzinfo=now.tzinfo)
    end_time = datetime.combine(week_end, datetime.max.time(), tzinfo=now.tzinfo)

    return [t for t in tasks if day_start <= _as_utc(t.due_date) <= end_time]


def filter_tasks(
    tasks: Iterable[Task],
    status: Optional[TaskStatus] = None,
    priority: Optional[TaskPriority] = None,
) -> List[Task]:
    result = list(tasks)
    if status is not None:
        result = [t for t in result if t.status == status]
    if priority is not None:
        result = [t for t in result if t.priority == priority]
    return result
