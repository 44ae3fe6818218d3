"""
Endpoint subpackage.

Each module defines an APIRouter for one area of the API.  The routers
are aggregated in ``api/router.py``.
"""
