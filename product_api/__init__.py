"""
Top-level package for the Product API.

All functionality lives in submodules under ``app``; import them with
fully qualified names such as ``product_api.app.main``.
"""

__all__ = []
