from typing import List, Optional

from taskdesk.core.store import Store
from taskdesk.models.models import Task
from taskdesk.models.schemas import TaskWithAssignee, UserOut


def with_assignee(store: Store, task: Task) -> TaskWithAssignee:
    # Dangling or missing assignee_id resolves to None
    assignee = store.get_user(task.assignee_id) if task.assignee_id is not None else None
    out = TaskWithAssignee.model_validate(task)
    out.assignee = UserOut.model_validate(assignee) if assignee else None
    return out


def list_with_assignee(store: Store, tasks: Optional[List[Task]] = None) -> List[TaskWithAssignee]:
    if tasks is None:
        tasks = store.get_all_tasks()
    users = {u.id: u for u in store.get_all_users()}
    out = []
    for t in tasks:
        row = TaskWithAssignee.model_validate(t)
        u = users.get(t.assignee_id)
        row.assignee = UserOut.model_validate(u) if u else None
        out.append(row)
    return out
