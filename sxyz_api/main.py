import socket
import sys
import time
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
# slowapi imports
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
# logger
import logging
from .config import Settings, get_settings
from .limiter import create_limiter
from .routers import create_docs_router, create_pages_router, create_utils_router

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)
# log formatting
formatter = logging.Formatter(
    '%(asctime)s - %(name)s - %(levelname)s - %(message)s')
# Configure the logger to output to console
console_handler = logging.StreamHandler()
console_handler.setFormatter(formatter)
logger.addHandler(console_handler)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.title,
        description=settings.description,
        version=settings.version,
        openapi_tags=settings.openapi_tags,
        # Documentation routes come from the docs router, behind the rate limit
        docs_url=None,
        openapi_url=None,
        redoc_url=None,
    )
    app.state.settings = settings

    # register the limiter and its exception handler
    limiter = create_limiter()
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = int((time.perf_counter() - started) * 1000)
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms} ms)"
        )
        return response

    # Added last, so CORS wraps everything including 429 responses
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(create_utils_router(limiter, settings))
    app.include_router(create_pages_router(limiter, settings))
    app.include_router(create_docs_router(limiter, settings))

    return app


# ASGI entrypoint (uvicorn: `uvicorn sxyz_api.main:app`)
app = create_app()


def bind_socket(host: str, port: int) -> socket.socket:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def run(settings: Optional[Settings] = None):
    """Bind the listening socket and serve until the process is terminated."""
    settings = settings or get_settings()
    try:
        sock = bind_socket(settings.host, settings.port)
    except OSError as e:
        logger.error(f"Failed to bind {settings.host}:{settings.port}: {e}")
        sys.exit(1)

    host, port = sock.getsockname()[:2]
    logger.info(f"Running in http://{host}:{port}")
    application = app if settings is app.state.settings else create_app(settings)
    config = uvicorn.Config(application, log_level="info")
    server = uvicorn.Server(config)
    server.run(sockets=[sock])


if __name__ == "__main__":
    run()
