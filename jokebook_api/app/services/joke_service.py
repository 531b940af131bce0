"""
Joke proxy.

Fetches a batch of two-part jokes from the upstream joke API and
normalizes them into ``Joke`` items numbered from 1.  The upstream is
asked for a fixed category and amount; clients cannot change either.
The call is made once per request, without retries: any failure is
reported as ``UpstreamError`` and no partial batch is returned.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from ..core.errors import UpstreamError
from ..schemas.joke import Joke

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Failed to fetch jokes"


def normalize_jokes(payload: Any) -> List[Joke]:
    """Map an upstream response body to a list of ``Joke`` items.

    The upstream returns ``{"jokes": [{"setup": ..., "delivery": ...}]}``
    for batches and a single joke object when one joke is requested.
    Raises ``UpstreamError`` for anything else.
    """
    if not isinstance(payload, dict):
        raise UpstreamError(FAILURE_MESSAGE)
    if payload.get("error"):
        logger.error("Joke API reported an error: %s", payload.get("message") or payload)
        raise UpstreamError(FAILURE_MESSAGE)
    items = payload.get("jokes")
    if items is None and "setup" in payload:
        items = [payload]
    if not isinstance(items, list):
        logger.error("Unexpected joke API response: %s", payload)
        raise UpstreamError(FAILURE_MESSAGE)
    jokes = []
    for index, item in enumerate(items):
        try:
            jokes.append(Joke(id=index + 1, title=item["setup"], content=item["delivery"]))
        except (KeyError, TypeError, ValueError) as exc:
            logger.error("Malformed joke at position %d: %s", index + 1, exc)
            raise UpstreamError(FAILURE_MESSAGE) from exc
    return jokes


class JokeService:
    """Client for the upstream joke provider."""

    def __init__(
        self,
        *,
        base_url: str,
        category: str = "Any",
        count: int = 10,
        timeout: Optional[float] = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.category = category
        self.count = count
        # A timeout of 0 means wait forever.
        self.timeout = timeout or None
        self.session = session or requests.Session()

    @property
    def url(self) -> str:
        return f"{self.base_url}/joke/{self.category}"

    def fetch_jokes(self, count: Optional[int] = None) -> List[Joke]:
        """Fetch and normalize one batch of jokes."""
        params: Dict[str, Any] = {"type": "twopart", "amount": count or self.count}
        try:
            logger.debug("Requesting %s jokes from %s", params["amount"], self.url)
            response = self.session.get(self.url, params=params, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            logger.error("Error fetching jokes: %s", exc)
            raise UpstreamError(FAILURE_MESSAGE) from exc
        except ValueError as exc:
            logger.error("Joke API returned invalid JSON: %s", exc)
            raise UpstreamError(FAILURE_MESSAGE) from exc
        jokes = normalize_jokes(payload)
        logger.info("Fetched %d jokes", len(jokes))
        return jokes

    def close(self) -> None:
        self.session.close()
