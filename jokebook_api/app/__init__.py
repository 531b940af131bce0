"""
Application package initializer.

This package contains the application factory and all of its
submodules.  Each resource (jokes, persons) exposes a router defined in
``api/endpoints`` and a service in ``services``.  Storage access goes
through the document store in ``core.db``.  The ready-to-serve ``app``
lives in ``main``.
"""

from .app_factory import create_app  # noqa: F401
