"""
Pydantic models for person records.

``PersonCreate`` is the request body of ``POST /api/persons``.  All
four fields are required and must be non-empty; ``marks`` and ``age``
may arrive either as JSON numbers or as numeric text (numeric text is
converted by ``PersonService``).  Unknown fields are rejected.

``PersonRead`` is the stored record as returned to clients, including
the store-assigned ``_id``.
"""

from typing import Any, Dict, Iterable, List, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, field_validator

REQUIRED_FIELDS = ("name", "marks", "age", "dob")
REQUIRED_MESSAGE = "All fields (name, marks, age, dob) are required!"

Number = Union[int, float]


class PersonCreate(BaseModel):
    """Schema for adding a person."""

    model_config = ConfigDict(extra="forbid")

    name: StrictStr = Field(..., examples=["Alice"])
    marks: Union[StrictInt, StrictFloat, StrictStr] = Field(..., examples=["90"])
    age: Union[StrictInt, StrictFloat, StrictStr] = Field(..., examples=["21"])
    dob: StrictStr = Field(..., examples=["2003-01-01"], description="Date of birth, YYYY-MM-DD")

    @field_validator("name", "marks", "age", "dob", mode="before")
    @classmethod
    def not_empty(cls, v):
        if v is None:
            raise ValueError(REQUIRED_MESSAGE)
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError(REQUIRED_MESSAGE)
        return v


class PersonRead(BaseModel):
    """Schema for reading a stored person."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Store-assigned identity")
    name: str
    marks: Number
    age: Number
    dob: str


class PersonCreated(BaseModel):
    """Response body of a successful add."""

    message: str
    person: PersonRead
    id: str


def describe_validation_errors(errors: Iterable[Dict[str, Any]]) -> str:
    """Condense pydantic error entries into one client-facing message.

    Missing or empty fields always produce ``REQUIRED_MESSAGE`` so the
    client sees the same text whichever field was left out.
    """
    errors = list(errors)
    for err in errors:
        if err.get("type") == "missing" or REQUIRED_MESSAGE in str(err.get("msg", "")):
            return REQUIRED_MESSAGE
    for err in errors:
        loc: List[str] = [str(part) for part in err.get("loc", ()) if part != "body"]
        if err.get("type") == "extra_forbidden" and loc:
            return f"Unexpected field: {loc[-1]}"
        if loc and loc[0] in REQUIRED_FIELDS:
            return f"Invalid value for {loc[0]}"
    return "Invalid request body"
