"""
Main entrypoint for the Jokebook API.

The application is instantiated at module import time as ``app`` so
that uvicorn can discover it, e.g.::

    DATABASE_URL=jokebook.db uvicorn jokebook_api.app.main:app

The document store is opened on startup from ``DATABASE_URL``.
``run.py`` is the preferred launcher: it connects to the store before
serving and exits if that fails.
"""

from .app_factory import create_app

app = create_app()
