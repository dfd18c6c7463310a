from typing import List

from fastapi import APIRouter, Depends

from taskdesk.core.store import Store
from taskdesk.routers.deps import get_store
from taskdesk.crud import analytics
from taskdesk.crud.tasks import list_with_assignee
from taskdesk.models.schemas import DashboardSummary, PerformanceRow, TaskWithAssignee, WorkloadRow

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.get("/dashboard", response_model=DashboardSummary)
def dashboard(store: Store = Depends(get_store)):
    return analytics.dashboard_summary(store)


@router.get("/performance", response_model=List[PerformanceRow])
def performance(store: Store = Depends(get_store)):
    return analytics.performance_report(store)


@router.get("/overdue", response_model=List[TaskWithAssignee])
def overdue(store: Store = Depends(get_store)):
    return list_with_assignee(store, analytics.overdue_tasks(store))


@router.get("/workload", response_model=List[WorkloadRow])
def workload(store: Store = Depends(get_store)):
    return analytics.employee_workload(store)
