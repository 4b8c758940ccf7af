from typing import Any, Callable

from fastapi import APIRouter

from app.api.controllers.user import get_details


def build_router(handler: Callable[..., Any] = get_details) -> APIRouter:
    """
    Router with a single route, GET /, dispatched to `handler`.
    The handler's status and body are returned unmodified.
    """
    router = APIRouter()
    router.add_api_route("/", handler, methods=["GET"])
    return router


router = build_router()
