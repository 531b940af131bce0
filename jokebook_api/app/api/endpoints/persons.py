"""
Person endpoints.

Persons can be listed and added; there is no update or delete route.
Request bodies are parsed with ``PersonCreate``; malformed bodies are
answered with HTTP 400 by the validation handler registered in
``main.create_app``.
"""

from typing import List

from fastapi import APIRouter, Depends

from jokebook_api.app.api.deps import get_person_service
from jokebook_api.app.schemas.person import PersonCreate, PersonCreated, PersonRead
from jokebook_api.app.services.person_service import PersonService

router = APIRouter()


@router.get("", response_model=List[PersonRead])
async def list_persons(service: PersonService = Depends(get_person_service)) -> List[PersonRead]:
    """Return every stored person in insertion order (no paging)."""
    return await service.list_persons()


@router.post("", response_model=PersonCreated)
async def add_person(
    person_in: PersonCreate,
    service: PersonService = Depends(get_person_service),
) -> PersonCreated:
    """Add a person and return it with its store-assigned identity."""
    person = await service.create_person(person_in)
    return PersonCreated(message="Person added successfully!", person=person, id=person.id)
