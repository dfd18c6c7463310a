from fastapi import APIRouter, Depends, HTTPException

from taskdesk.core.auth import authenticate
from taskdesk.core.store import Store
from taskdesk.routers.deps import get_store
from taskdesk.models.schemas import LoginBody, LoginResponse, UserOut

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login(b: LoginBody, store: Store = Depends(get_store)):
    user = authenticate(store, b.username, b.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    # no token/session; the client keeps the returned user
    return {"user": UserOut.model_validate(user)}
