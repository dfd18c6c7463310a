from typing import List

from fastapi import APIRouter, Depends, HTTPException

from taskdesk.core.store import Store
from taskdesk.routers.deps import get_store
from taskdesk.models.schemas import TaskOut, UserCreate, UserOut

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=List[UserOut])
def list_users(store: Store = Depends(get_store)):
    return [UserOut.model_validate(u) for u in store.get_all_users()]


@router.post("", response_model=UserOut)
def create_user(body: UserCreate, store: Store = Depends(get_store)):
    return UserOut.model_validate(store.create_user(body))


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: int, store: Store = Depends(get_store)):
    user = store.get_user(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return UserOut.model_validate(user)


@router.get("/{user_id}/tasks", response_model=List[TaskOut])
def list_user_tasks(user_id: int, store: Store = Depends(get_store)):
    # unknown user -> empty list, same as a user with no tasks
    return [TaskOut.model_validate(t) for t in store.get_tasks_by_assignee(user_id)]
