"""
FastAPI dependencies resolving the services attached to the app.

``create_app`` stores one instance of each service on ``app.state``;
these helpers hand them to route handlers so tests can swap them via
``app.dependency_overrides`` or by passing doubles to ``create_app``.
"""

from fastapi import Request

from ..services.joke_service import JokeService
from ..services.person_service import PersonService


def get_person_service(request: Request) -> PersonService:
    return request.app.state.person_service


def get_joke_service(request: Request) -> JokeService:
    return request.app.state.joke_service
