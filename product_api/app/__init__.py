"""
Application package initializer.

Contains the main entrypoint for the API and its submodules: ``core``
(configuration, logging, errors, authentication, storage),
``schemas``, ``services`` and the HTTP routes under ``api``.
"""

from .main import app  # noqa: F401
