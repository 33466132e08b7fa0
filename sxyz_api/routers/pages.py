"""
Static HTML page endpoints.

Pages are read from disk on every request, so edits to the files show up
immediately without a restart.
"""

from pathlib import Path
from typing import NamedTuple

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse
from slowapi import Limiter
from starlette.concurrency import run_in_threadpool
import logging

from ..config import Settings
from ..limiter import global_limit

logger = logging.getLogger(__name__)


class Page(NamedTuple):
    path: str
    setting: str  # name of the Settings field holding the file path
    summary: str
    name: str


PAGES = [
    Page("/", "home_path", "Home page", "home"),
    Page("/creator", "creator_path", "Creator page", "creator"),
]


async def read_page(file_path: Path) -> bytes:
    return await run_in_threadpool(file_path.read_bytes)


def _make_handler(page: Page, settings: Settings):
    file_path = getattr(settings, page.setting)

    async def handler(request: Request):
        try:
            content = await read_page(file_path)
        except OSError as e:
            logger.error(f"Error reading {page.name} page from {file_path}: {e}")
            raise HTTPException(500, f"Internal server error: {str(e)}")
        return HTMLResponse(content)

    # slowapi keys its route registry on the function name
    handler.__name__ = page.name
    handler.__doc__ = f"Serve the {page.name} page verbatim from {page.setting}."
    return handler


def create_router(limiter: Limiter, settings: Settings) -> APIRouter:
    router = APIRouter(
        tags=["pages"],
    )

    for page in PAGES:
        endpoint = global_limit(limiter, settings)(_make_handler(page, settings))
        router.add_api_route(
            page.path,
            endpoint,
            methods=["GET"],
            summary=page.summary,
            name=page.name,
            response_class=HTMLResponse,
        )
        router.add_api_route(
            page.path,
            endpoint,
            methods=["HEAD"],
            name=f"{page.name}_head",
            response_class=HTMLResponse,
            include_in_schema=False,
        )

    return router
