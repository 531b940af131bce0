"""
Joke endpoints.

``GET /api/jokes`` proxies one batch from the upstream joke provider.
The handler is synchronous so FastAPI runs the blocking upstream call
in its worker thread pool instead of on the event loop.
"""

from typing import List

from fastapi import APIRouter, Depends

from jokebook_api.app.api.deps import get_joke_service
from jokebook_api.app.schemas.joke import Joke
from jokebook_api.app.services.joke_service import JokeService

router = APIRouter()


@router.get("", response_model=List[Joke])
def list_jokes(service: JokeService = Depends(get_joke_service)) -> List[Joke]:
    """Return a fresh batch of jokes.

    Upstream failures surface as ``UpstreamError`` and are answered
    with HTTP 500 by the application's exception handlers.
    """
    return service.fetch_jokes()
