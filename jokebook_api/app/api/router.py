"""
Top‑level API router.

Aggregates the resource routers under a unified prefix.  When a new
resource is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import jokes, persons

router = APIRouter()

router.include_router(jokes.router, prefix="/jokes", tags=["jokes"])
router.include_router(persons.router, prefix="/persons", tags=["persons"])
