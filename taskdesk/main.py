import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from taskdesk.core import config
from taskdesk.core.logging_setup import setup_logging
from taskdesk.core.store import Store
from taskdesk.routers.analytics import router as analytics_router
from taskdesk.routers.auth import router as auth_router
from taskdesk.routers.tasks import router as tasks_router
from taskdesk.routers.users import router as users_router

logger = logging.getLogger(__name__)


def _invalid_message(path: str) -> str:
    if path.startswith("/api/users"):
        return "Invalid user data"
    if path.startswith("/api/tasks"):
        return "Invalid task data"
    return "Invalid request data"


def _not_found_message(path: str) -> str:
    if path.startswith("/api/users"):
        return "User not found"
    if path.startswith("/api/tasks"):
        return "Task not found"
    return "Not found"


async def validation_error(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    path = request.url.path
    # A non-numeric id can never match an entity
    if errors and all(e["loc"][0] == "path" for e in errors):
        return JSONResponse({"detail": _not_found_message(path)}, status_code=404)
    # Malformed bodies are a 400 in this API, not FastAPI's default 422
    logger.warning("Rejected %s %s errors=%s", request.method, path, len(errors))
    return JSONResponse({"detail": _invalid_message(path)}, status_code=400)


def create_app(seed: Optional[bool] = None) -> FastAPI:
    app = FastAPI(title=config.APP_NAME, version=config.APP_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS, allow_methods=["*"], allow_headers=["*"], allow_credentials=False
    )
    app.add_exception_handler(RequestValidationError, validation_error)

    if seed is None:
        seed = config.SEED_SAMPLE_DATA
    store = Store()
    if seed:
        store.seed()
    app.state.store = store
    logger.info("Store ready users=%s tasks=%s", store.count_users(), store.count_tasks())

    @app.get("/health")
    def health():
        return {"ok": True}

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(tasks_router)
    app.include_router(analytics_router)
    return app


def run() -> None:
    import uvicorn

    setup_logging(config.LOG_LEVEL, config.LOG_FILE)
    uvicorn.run(create_app(), host=config.HOST, port=config.PORT, log_config=None)


if __name__ == "__main__":
    run()
