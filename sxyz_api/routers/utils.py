"""
Utility endpoints.
"""

from fastapi import APIRouter, Request, Response
from pydantic import BaseModel
from slowapi import Limiter

from ..config import Settings
from ..limiter import global_limit


class PingResponse(BaseModel):
    message: str


def create_router(limiter: Limiter, settings: Settings) -> APIRouter:
    router = APIRouter(
        tags=["tools"],
    )

    @router.get(
        "/ping",
        summary="Check your ping!",
        response_model=PingResponse,
        responses={200: {"description": "success"}},
    )
    @router.head("/ping", include_in_schema=False)
    @global_limit(limiter, settings)
    async def ping(request: Request, response: Response):
        """Simple health check endpoint that returns 'pong!' to confirm the API is running."""
        return {"message": "pong!"}

    return router
