from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class Role(str, Enum):
    ADMIN = "admin"
    MANAGER = "manager"
    EMPLOYEE = "employee"


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    OVERDUE = "overdue"


@dataclass(frozen=True)
class User:
    id: int
    username: str
    email: str
    password: str  # plaintext, never serialized
    full_name: str
    role: Role
    is_active: bool
    joined_at: datetime


@dataclass(frozen=True)
class Task:
    id: int
    title: str
    description: Optional[str]
    priority: Priority
    status: TaskStatus
    assignee_id: Optional[int]
    progress: int
    created_at: datetime
    due_date: Optional[datetime]
