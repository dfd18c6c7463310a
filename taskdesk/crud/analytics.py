from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional

from taskdesk.core.store import Store
from taskdesk.models.models import Task, TaskStatus
from taskdesk.models.schemas import DashboardMetrics, DashboardSummary, PerformanceRow, WorkloadRow

# Report row order
REPORT_STATUSES = (TaskStatus.COMPLETED, TaskStatus.IN_PROGRESS, TaskStatus.OVERDUE, TaskStatus.PENDING)


def _percent(part: int, total: int) -> str:
    # "0" rather than "0.0" when there is nothing to divide by
    if total == 0:
        return "0"
    # ties round up, on the exact binary value of the float
    return str(Decimal(part / total * 100).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _count(tasks: List[Task], status: TaskStatus) -> int:
    return sum(1 for t in tasks if t.status == status)


def dashboard_summary(store: Store) -> DashboardSummary:
    tasks = store.get_all_tasks()
    metrics = DashboardMetrics(
        completed=_count(tasks, TaskStatus.COMPLETED),
        overdue=_count(tasks, TaskStatus.OVERDUE),
        in_progress=_count(tasks, TaskStatus.IN_PROGRESS),
        scheduled=_count(tasks, TaskStatus.PENDING),
        total=len(tasks),
    )
    return DashboardSummary(metrics=metrics, progress_percentage=_percent(metrics.completed, metrics.total))


def performance_report(store: Store) -> List[PerformanceRow]:
    tasks = store.get_all_tasks()
    rows = []
    for status in REPORT_STATUSES:
        n = _count(tasks, status)
        rows.append(PerformanceRow(status=status, count=n, percentage=_percent(n, len(tasks))))
    return rows


def overdue_tasks(store: Store, now: Optional[datetime] = None) -> List[Task]:
    """Tasks marked overdue, plus unfinished tasks whose due date has passed."""
    now = now or datetime.now(timezone.utc)
    return [
        t for t in store.get_all_tasks()
        if t.status == TaskStatus.OVERDUE
        or (t.due_date is not None and t.due_date < now and t.status != TaskStatus.COMPLETED)
    ]


def employee_workload(store: Store) -> List[WorkloadRow]:
    tasks = store.get_all_tasks()
    rows = []
    for u in store.get_all_users():
        mine = [t for t in tasks if t.assignee_id == u.id]
        avg = round(sum(t.progress for t in mine) / len(mine), 1) if mine else 0.0
        rows.append(WorkloadRow(
            user_id=u.id,
            full_name=u.full_name,
            assigned=len(mine),
            completed=_count(mine, TaskStatus.COMPLETED),
            average_progress=avg,
        ))
    return rows
