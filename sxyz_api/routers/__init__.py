"""
Router modules for organizing FastAPI endpoints by service.
"""

from .docs import create_router as create_docs_router
from .pages import create_router as create_pages_router
from .utils import create_router as create_utils_router

__all__ = [
    "create_docs_router",
    "create_pages_router",
    "create_utils_router",
]
