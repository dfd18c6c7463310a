from typing import List

from fastapi import APIRouter, Depends, HTTPException

from taskdesk.core.store import Store
from taskdesk.routers.deps import get_store
from taskdesk.crud.tasks import list_with_assignee, with_assignee
from taskdesk.models.schemas import MessageOut, ProgressDelta, TaskCreate, TaskOut, TaskPatch, TaskWithAssignee

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


def _not_found():
    return HTTPException(status_code=404, detail="Task not found")


@router.get("", response_model=List[TaskWithAssignee])
def list_tasks(store: Store = Depends(get_store)):
    return list_with_assignee(store)


@router.get("/{task_id}", response_model=TaskWithAssignee)
def get_task(task_id: int, store: Store = Depends(get_store)):
    task = store.get_task(task_id)
    if not task:
        raise _not_found()
    return with_assignee(store, task)


@router.post("", response_model=TaskOut)
def create_task(body: TaskCreate, store: Store = Depends(get_store)):
    return TaskOut.model_validate(store.create_task(body))


@router.put("/{task_id}", response_model=TaskOut)
def update_task(task_id: int, body: TaskPatch, store: Store = Depends(get_store)):
    task = store.update_task(task_id, body)
    if not task:
        raise _not_found()
    return TaskOut.model_validate(task)


@router.post("/{task_id}/progress", response_model=TaskOut)
def adjust_progress(task_id: int, body: ProgressDelta, store: Store = Depends(get_store)):
    task = store.adjust_progress(task_id, body.delta)
    if not task:
        raise _not_found()
    return TaskOut.model_validate(task)


@router.delete("/{task_id}", response_model=MessageOut)
def delete_task(task_id: int, store: Store = Depends(get_store)):
    if not store.delete_task(task_id):
        raise _not_found()
    return {"message": "Task deleted successfully"}
