from datetime import datetime, timezone
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from taskdesk.models.models import Priority, Role, TaskStatus


class CamelModel(BaseModel):
    """JSON bodies use camelCase keys; snake_case is accepted on input too."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def _as_utc(v: Optional[datetime]) -> Optional[datetime]:
    if v is not None and v.tzinfo is None:
        return v.replace(tzinfo=timezone.utc)
    return v


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


# --------- Request bodies ----------
class LoginBody(BaseModel):
    username: str
    password: str


class UserCreate(CamelModel):
    username: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)
    full_name: str = Field(min_length=1)
    role: Optional[Role] = None
    is_active: Optional[bool] = None


class TaskCreate(CamelModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    priority: Priority
    status: TaskStatus
    assignee_id: Optional[int] = None
    progress: Optional[int] = Field(None, ge=0, le=100)
    due_date: Optional[UtcDatetime] = None


class TaskPatch(CamelModel):
    """Partial task update. Only the fields present in the body are applied."""

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    priority: Optional[Priority] = None
    status: Optional[TaskStatus] = None
    assignee_id: Optional[int] = None
    progress: Optional[int] = Field(None, ge=0, le=100)
    due_date: Optional[UtcDatetime] = None

    @model_validator(mode="after")
    def _required_fields_not_null(self):
        for name in ("title", "priority", "status", "progress"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class ProgressDelta(BaseModel):
    delta: int


# --------- Responses ----------
class UserOut(CamelModel):
    id: int
    username: str
    email: str
    full_name: str
    role: Role
    is_active: bool
    joined_at: datetime


class LoginResponse(BaseModel):
    user: UserOut


class TaskOut(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    priority: Priority
    status: TaskStatus
    assignee_id: Optional[int] = None
    progress: int
    created_at: datetime
    due_date: Optional[datetime] = None


class TaskWithAssignee(TaskOut):
    assignee: Optional[UserOut] = None


class MessageOut(BaseModel):
    message: str


class DashboardMetrics(CamelModel):
    completed: int
    overdue: int
    in_progress: int
    scheduled: int
    total: int


class DashboardSummary(CamelModel):
    metrics: DashboardMetrics
    progress_percentage: str


class PerformanceRow(CamelModel):
    status: TaskStatus
    count: int
    percentage: str


class WorkloadRow(CamelModel):
    user_id: int
    full_name: str
    assigned: int
    completed: int
    average_progress: float
