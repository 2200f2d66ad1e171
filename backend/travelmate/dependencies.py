from fastapi import Request

from travelmate.services.storage import MemStorage


def get_store(request: Request) -> MemStorage:
    """The store built for this app instance during startup."""
    return request.app.state.store
