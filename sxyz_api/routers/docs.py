"""
API documentation endpoints.

The OpenAPI document and the Swagger UI are registered here rather than by
FastAPI itself, so they count against the same rate limit as the rest of the API.
"""

from fastapi import APIRouter, Request
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import JSONResponse
from slowapi import Limiter

from ..config import Settings
from ..limiter import global_limit


def create_router(limiter: Limiter, settings: Settings) -> APIRouter:
    router = APIRouter(include_in_schema=False)

    @router.get(settings.openapi_url, summary="OpenAPI schema")
    @global_limit(limiter, settings)
    async def openapi_schema(request: Request):
        """Return the machine-readable description of the API."""
        return JSONResponse(request.app.openapi())

    @router.get(settings.docs_url, summary="Swagger UI")
    @global_limit(limiter, settings)
    async def swagger_ui(request: Request):
        return get_swagger_ui_html(
            openapi_url=settings.openapi_url,
            title=f"{settings.title} - Swagger UI",
            swagger_ui_parameters={"docExpansion": settings.doc_expansion},
        )

    return router
