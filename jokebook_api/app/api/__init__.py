"""
API package containing the HTTP routes.

``router`` aggregates the resource routers and is mounted under the
``/api`` prefix by ``main.create_app``.  Route handlers obtain their
services through the dependencies in ``deps``.
"""
