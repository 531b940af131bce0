"""Client state and pagination controller.

``ClientState`` holds everything the Jokebook front end displays: the
current mode (jokes or persons), the fetched lists, the loading flag,
the error message and the current person page.  It talks to the
service through :class:`jokebook_client.JokebookAPI` and keeps the last
joke batch in a :class:`LocalStorage` file so the next start can show it
without a network round trip.

Every fetch is tagged with a generation number.  When a response
arrives for a request that has since been superseded by a newer one,
it is dropped, so the displayed state always belongs to the most
recently issued request even if responses arrive out of order.
"""

from __future__ import annotations

import json
import logging
import math
import re
import threading
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from jokebook_client import JokebookAPI

logger = logging.getLogger(__name__)

PAGE_SIZE = 5
JOKES_KEY = "jokes"

JOKES_ERROR = "Failed to fetch jokes. Please try again later."
PERSONS_ERROR = "Failed to fetch persons. Please try again later."
ADD_SUCCESS = "User added successfully!"
ADD_FAILURE = "Failed to add person."

NUMERIC_TEXT = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class Mode(Enum):
    JOKES = "jokes"
    PERSONS = "persons"


class LocalStorage:
    """String key/value storage persisted as a JSON file.

    An unreadable or corrupt file behaves like an empty one; the next
    write replaces it.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable local storage %s: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def get_item(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f)


def parse_number(text: Any) -> Optional[Union[int, float]]:
    """Return the number in ``text`` or ``None`` if it is not numeric.

    Only plain ASCII decimal notation is accepted, so ``"1_000"`` and
    digits from other scripts are rejected.
    """
    if text is None:
        return None
    text = str(text).strip()
    if not NUMERIC_TEXT.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return int(number) if number.is_integer() else number


def page_count(total: int, page_size: int = PAGE_SIZE) -> int:
    return max(1, math.ceil(total / page_size))


class ClientState:
    """Display state machine for the jokes feed and the person pages."""

    def __init__(self, api: JokebookAPI, storage: LocalStorage, page_size: int = PAGE_SIZE) -> None:
        self.api = api
        self.storage = storage
        self.page_size = page_size
        self.mode = Mode.JOKES
        self.jokes: List[Dict[str, Any]] = []
        self.persons: List[Dict[str, Any]] = []
        self.loading = True
        self.error: Optional[str] = None
        self.page = 0
        self._generation = 0
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Request bookkeeping
    # ------------------------------------------------------------------
    def _begin(self) -> int:
        with self._lock:
            self._generation += 1
            self.loading = True
            self.error = None
            return self._generation

    def _is_stale(self, generation: int) -> bool:
        if generation != self._generation:
            logger.debug("Discarding response of superseded request %d", generation)
            return True
        return False

    # ------------------------------------------------------------------
    # Jokes
    # ------------------------------------------------------------------
    def cached_jokes(self) -> Optional[List[Dict[str, Any]]]:
        raw = self.storage.get_item(JOKES_KEY)
        if raw is None:
            return None
        try:
            jokes = json.loads(raw)
        except ValueError:
            jokes = None
        if not isinstance(jokes, list):
            logger.warning("Dropping corrupt cached jokes")
            self.storage.remove_item(JOKES_KEY)
            return None
        return jokes

    def start(self) -> None:
        """Initial load: show cached jokes, or fetch them if none are cached."""
        cached = self.cached_jokes()
        if cached is not None:
            logger.info("Loaded jokes from local storage")
            with self._lock:
                self.mode = Mode.JOKES
                self.jokes = cached
                self.loading = False
                self.error = None
            return
        self.show_jokes()

    def show_jokes(self) -> bool:
        """Switch to the jokes feed and fetch a fresh batch."""
        with self._lock:
            self.mode = Mode.JOKES
        return self._fetch_jokes()

    def refresh_jokes(self) -> bool:
        """Fetch a fresh batch, overwriting the cached one on success."""
        logger.info("Refreshing jokes...")
        return self.show_jokes()

    def _fetch_jokes(self) -> bool:
        generation = self._begin()
        jokes, error = self.api.list_jokes()
        with self._lock:
            if self._is_stale(generation):
                return False
            self.loading = False
            if error:
                self.error = JOKES_ERROR
                return False
            self.jokes = jokes
            self.storage.set_item(JOKES_KEY, json.dumps(jokes))
            logger.info("Received %d jokes", len(jokes))
            return True

    # ------------------------------------------------------------------
    # Persons
    # ------------------------------------------------------------------
    def show_persons(self) -> bool:
        """Switch to the person pages, back on the first page, and fetch."""
        with self._lock:
            self.mode = Mode.PERSONS
            self.page = 0
        return self._fetch_persons()

    def _fetch_persons(self) -> bool:
        generation = self._begin()
        persons, error = self.api.list_persons()
        with self._lock:
            if self._is_stale(generation):
                return False
            self.loading = False
            if error:
                self.error = PERSONS_ERROR
                return False
            self.persons = persons
            self.page = min(self.page, self.last_page())
            logger.info("Received %d persons", len(persons))
            return True

    def add_person(self, name: Any, marks: Any, age: Any, dob: Any) -> Tuple[bool, str]:
        """Validate the four prompt answers, post them and reload the list.

        Returns ``(ok, message)`` where ``message`` is what the view
        should show.  The list is re-fetched after a successful add; the
        current page is kept.
        """
        name = (name or "").strip()
        if not name:
            return False, "Invalid Name"
        marks_value = parse_number(marks)
        if marks_value is None:
            return False, "Invalid Marks"
        age_value = parse_number(age)
        if age_value is None:
            return False, "Invalid Age"
        dob = (dob or "").strip()
        if not dob:
            return False, "Invalid DOB"

        payload = {"name": name, "marks": marks_value, "age": age_value, "dob": dob}
        _, error = self.api.add_person(payload)
        if error:
            logger.error("Error adding person: %s", error.get("message"))
            return False, ADD_FAILURE
        self._fetch_persons()
        return True, ADD_SUCCESS

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------
    def last_page(self) -> int:
        return page_count(len(self.persons), self.page_size) - 1

    def page_items(self) -> List[Dict[str, Any]]:
        start = self.page * self.page_size
        return self.persons[start:start + self.page_size]

    def has_previous(self) -> bool:
        return self.page > 0

    def has_next(self) -> bool:
        return (self.page + 1) * self.page_size < len(self.persons)

    def next_page(self) -> bool:
        with self._lock:
            if not self.has_next():
                return False
            self.page += 1
            return True

    def previous_page(self) -> bool:
        with self._lock:
            if not self.has_previous():
                return False
            self.page -= 1
            return True
