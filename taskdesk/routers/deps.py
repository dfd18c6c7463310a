from fastapi import Request

from taskdesk.core.store import Store


def get_store(request: Request) -> Store:
    """FastAPI dependency: the Store created for this app."""
    return request.app.state.store
