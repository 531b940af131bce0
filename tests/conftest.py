"""
Shared fixtures: a temporary document store, a stubbed upstream joke
API and a TestClient wired to both.
"""
from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests
from fastapi.testclient import TestClient

# Make the top-level modules importable when running from a checkout.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from jokebook_api.app.core.config import Settings
from jokebook_api.app.core.db import DocumentStore
from jokebook_api.app.app_factory import create_app
from jokebook_api.app.services.joke_service import JokeService

from .helpers import UPSTREAM_JOKES, make_response


@pytest.fixture()
def store(tmp_path):
    store = DocumentStore.connect(str(tmp_path / "INDEX.db"))
    yield store
    store.close()


@pytest.fixture()
def upstream():
    session = MagicMock(spec=requests.Session)
    session.get.return_value = make_response(200, UPSTREAM_JOKES)
    return session


@pytest.fixture()
def settings(tmp_path):
    return Settings(database_url=str(tmp_path / "INDEX.db"), cors_origins="*")


@pytest.fixture()
def joke_service(upstream):
    return JokeService(base_url="https://jokes.test", session=upstream)


@pytest.fixture()
def client(settings, store, joke_service):
    app = create_app(settings=settings, store=store, joke_service=joke_service)
    with TestClient(app) as client:
        yield client
