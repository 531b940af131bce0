"""
Endpoint subpackage.

Each module in this package defines an APIRouter for one resource
(jokes, persons).  The routers are aggregated in ``router.py``.
"""
