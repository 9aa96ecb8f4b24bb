"""
Endpoint subpackage.

Each module defines an APIRouter.  Domain routers are aggregated in
``api/router.py``; the welcome route in ``root`` is mounted directly on
the application.
"""
