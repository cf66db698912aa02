"""Pydantic schemas for task records and payloads."""

from pydantic import BaseModel, Field, TypeAdapter, field_validator
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, List


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TaskStatus(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TaskCreate(BaseModel):
    """Fields supplied by the caller when creating a task."""

    title: str = Field(min_length=1)
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: datetime = Field(default_factory=utcnow)


class TaskUpdate(BaseModel):
    """Partial update; only explicitly set fields are merged."""

    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[datetime] = None

    @field_validator("title", "status", "priority", "due_date")
    @classmethod
    def not_null(cls, value):
        # None n'est accepté que pour description
        if value is None:
            raise ValueError("field cannot be cleared")
        return value


class Task(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    status: TaskStatus
    priority: TaskPriority
    due_date: datetime
    created_at: datetime
    updated_at: datetime


class TaskStats(BaseModel):
    total: int
    completed: int
    pending: int
    overdue: int


# Codec de la collection persistée (tableau JSON)
TaskList = TypeAdapter(List[Task])
