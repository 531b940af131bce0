"""
Business logic for person records.

Persons are created and listed, never updated or deleted.  Input is
validated before anything reaches the document store: every field is
required, and ``marks``/``age`` must be numbers or numeric text.
Numeric text is converted to ``int`` when it is integral and to
``float`` otherwise; text that is not a finite number is rejected with
``ValidationError`` rather than stored.  Only plain ASCII decimal
notation counts as numeric text.

Store calls run in the worker thread pool so the blocking ``sqlite3``
I/O never stalls the event loop.
"""

import logging
import math
import re
from typing import Any, List

from pydantic import ValidationError as SchemaError
from starlette.concurrency import run_in_threadpool

from ..core.db import PERSON_COLLECTION, DocumentStore
from ..core.errors import StorageError, ValidationError
from ..schemas.person import Number, PersonCreate, PersonRead, describe_validation_errors

logger = logging.getLogger(__name__)

# Plain ASCII decimal notation only: no digit separators, no other scripts.
NUMERIC_TEXT = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def to_number(field_name: str, value: Any) -> Number:
    """Convert ``value`` to an int or float, or raise ``ValidationError``."""
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        number = value
    else:
        text = str(value).strip()
        if not NUMERIC_TEXT.fullmatch(text):
            raise ValidationError(f"{field_name} must be a number")
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            raise ValidationError(f"{field_name} must be a number") from None
    if math.isnan(number) or math.isinf(number):
        raise ValidationError(f"{field_name} must be a number")
    if number.is_integer() and not isinstance(value, float):
        return int(number)
    return number


class PersonService:
    """Validate person payloads and store them through the gateway."""

    def __init__(self, store: DocumentStore, collection: str = PERSON_COLLECTION) -> None:
        self.store = store
        self.collection = collection

    async def add_person(self, name: Any, marks: Any, age: Any, dob: Any) -> PersonRead:
        """Validate raw field values and store a new person.

        Raises ``ValidationError`` if any value is missing or empty, or
        if ``marks``/``age`` are not numeric.
        """
        try:
            data = PersonCreate(name=name, marks=marks, age=age, dob=dob)
        except SchemaError as exc:
            raise ValidationError(describe_validation_errors(exc.errors())) from None
        return await self.create_person(data)

    async def create_person(self, data: PersonCreate) -> PersonRead:
        """Store an already parsed ``PersonCreate`` and return the record."""
        doc = {
            "name": data.name,
            "marks": to_number("marks", data.marks),
            "age": to_number("age", data.age),
            "dob": data.dob,
        }
        try:
            identity = await run_in_threadpool(self.store.insert, self.collection, doc)
        except StorageError as exc:
            logger.error("Error adding person: %s", exc)
            raise StorageError("Failed to add person") from exc
        logger.info("Added person %s (%s)", identity, data.name)
        return PersonRead(_id=identity, **doc)

    async def list_persons(self) -> List[PersonRead]:
        """Return all persons in insertion order."""
        try:
            docs = await run_in_threadpool(self.store.find_all, self.collection)
        except StorageError as exc:
            logger.error("Error fetching persons: %s", exc)
            raise StorageError("Failed to fetch persons") from exc
        return [PersonRead(**doc) for doc in docs]
