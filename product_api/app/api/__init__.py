"""
API package.

``router.py`` exposes a top-level ``router`` mounted under ``/api``
which includes the domain routers from ``endpoints``.
"""
