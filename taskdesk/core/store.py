import logging
import threading
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, List, Optional

from taskdesk.models.models import Priority, Role, Task, TaskStatus, User
from taskdesk.models.schemas import TaskCreate, TaskPatch, UserCreate

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _day(s: str) -> datetime:
    return datetime.fromisoformat(s).replace(tzinfo=timezone.utc)


class Store:
    """
    In-memory store for users and tasks.

    - Two id-keyed dicts (insertion order is listing order).
    - One counter per entity type; ids are never reused, even after a delete.
    - Expected outcomes are return values: None for "not found", bool for delete.

    Thread-safety:
    - FastAPI runs sync endpoints in a thread pool, so every method takes
      the same lock. Stored entities are frozen and replaced on update.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._users: Dict[int, User] = {}
        self._tasks: Dict[int, Task] = {}
        self._next_user_id = 1
        self._next_task_id = 1

    # ---- low-level helpers ----

    def _take_user_id(self) -> int:
        uid = self._next_user_id
        self._next_user_id += 1
        return uid

    def _take_task_id(self) -> int:
        tid = self._next_task_id
        self._next_task_id += 1
        return tid

    # ---- users ----

    def get_user(self, user_id: int) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            for u in self._users.values():
                if u.username == username:
                    return u
            return None

    def create_user(self, data: UserCreate) -> User:
        with self._lock:
            user = User(
                id=self._take_user_id(),
                username=data.username,
                email=data.email,
                password=data.password,
                full_name=data.full_name,
                role=data.role or Role.EMPLOYEE,
                is_active=True if data.is_active is None else data.is_active,
                joined_at=_utcnow(),
            )
            self._users[user.id] = user
        logger.debug("User created id=%s username=%s role=%s", user.id, user.username, user.role.value)
        return user

    def get_all_users(self) -> List[User]:
        with self._lock:
            return list(self._users.values())

    def count_users(self) -> int:
        with self._lock:
            return len(self._users)

    # ---- tasks ----

    def get_task(self, task_id: int) -> Optional[Task]:
        with self._lock:
            return self._tasks.get(task_id)

    def get_all_tasks(self) -> List[Task]:
        with self._lock:
            return list(self._tasks.values())

    def count_tasks(self) -> int:
        with self._lock:
            return len(self._tasks)

    def create_task(self, data: TaskCreate) -> Task:
        with self._lock:
            task = Task(
                id=self._take_task_id(),
                title=data.title,
                description=data.description,
                priority=data.priority,
                status=data.status,
                assignee_id=data.assignee_id,
                progress=0 if data.progress is None else data.progress,
                created_at=_utcnow(),
                due_date=data.due_date,
            )
            self._tasks[task.id] = task
        logger.debug("Task created id=%s status=%s assignee_id=%s", task.id, task.status.value, task.assignee_id)
        return task

    def update_task(self, task_id: int, patch: TaskPatch) -> Optional[Task]:
        """
        Apply the fields explicitly set on the patch to an existing task.

        Unset fields are left untouched; id and created_at are not patchable.
        Returns the merged task, or None if task_id is unknown.
        """
        changes = patch.model_dump(exclude_unset=True)
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                return None
            task = replace(task, **changes)
            self._tasks[task_id] = task
        logger.debug("Task updated id=%s fields=%s", task_id, sorted(changes))
        return task

    def adjust_progress(self, task_id: int, delta: int) -> Optional[Task]:
        """Add delta to a task's progress, clamped to 0..100."""
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                return None
            task = replace(task, progress=max(0, min(100, task.progress + delta)))
            self._tasks[task_id] = task
        logger.debug("Task progress id=%s delta=%s progress=%s", task_id, delta, task.progress)
        return task

    def delete_task(self, task_id: int) -> bool:
        with self._lock:
            removed = self._tasks.pop(task_id, None) is not None
        if removed:
            logger.debug("Task deleted id=%s", task_id)
        return removed

    def get_tasks_by_assignee(self, assignee_id: int) -> List[Task]:
        with self._lock:
            return [t for t in self._tasks.values() if t.assignee_id == assignee_id]

    # ---- sample data ----

    def seed(self) -> None:
        """Insert the fixed demo users and tasks."""
        with self._lock:
            admin = User(
                id=self._take_user_id(), username="admin", email="admin@company.com",
                password="admin123", full_name="System Administrator", role=Role.ADMIN,
                is_active=True, joined_at=_day("2023-01-01"),
            )
            manager = User(
                id=self._take_user_id(), username="manager1", email="manager1@company.com",
                password="mgr123", full_name="Sara Ahmed", role=Role.MANAGER,
                is_active=True, joined_at=_day("2023-08-20"),
            )
            employee = User(
                id=self._take_user_id(), username="employee1", email="employee1@company.com",
                password="emp123", full_name="Ahmed Mohamed", role=Role.EMPLOYEE,
                is_active=True, joined_at=_day("2024-01-15"),
            )
            for u in (admin, manager, employee):
                self._users[u.id] = u

            tasks = [
                Task(
                    id=self._take_task_id(), title="Review monthly sales report",
                    description="Full review of the month's sales and analytics",
                    priority=Priority.HIGH, status=TaskStatus.IN_PROGRESS, assignee_id=employee.id,
                    progress=75, created_at=_day("2025-06-15"), due_date=_day("2025-06-30"),
                ),
                Task(
                    id=self._take_task_id(), title="Update company website",
                    description="Refresh the content and roll out the new design",
                    priority=Priority.MEDIUM, status=TaskStatus.COMPLETED, assignee_id=manager.id,
                    progress=100, created_at=_day("2025-06-10"), due_date=_day("2025-06-25"),
                ),
                Task(
                    id=self._take_task_id(), title="Prepare client presentation",
                    description="Put together a full presentation for new clients",
                    priority=Priority.HIGH, status=TaskStatus.PENDING, assignee_id=employee.id,
                    progress=25, created_at=_day("2025-06-20"), due_date=_day("2025-07-05"),
                ),
            ]
            for t in tasks:
                self._tasks[t.id] = t
