"""
Pydantic schema for joke items.

Jokes are never stored by the service.  Each batch fetched from the
upstream provider is numbered from 1, so ``id`` only identifies an item
within the batch it came from.
"""

from pydantic import BaseModel, Field


class Joke(BaseModel):
    """A single setup/delivery joke as exposed by the API."""

    id: int = Field(..., ge=1, examples=[1])
    title: str = Field(..., description="Setup of the joke")
    content: str = Field(..., description="Delivery (punchline) of the joke")
