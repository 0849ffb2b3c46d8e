"""
Top‑level router for version 1 of the API.

This router aggregates the collection and mailing list routers.  The
application mounts it at the root so the public paths are ``/`` and
``/lists/...``.
"""

from fastapi import APIRouter

from .endpoints import collection, lists

router = APIRouter()

router.include_router(collection.router, tags=["collection"])
router.include_router(lists.router, prefix="/lists", tags=["lists"])
