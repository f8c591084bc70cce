"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  The code is split into layers: ``repositories`` owns the
in‑memory vehicle store, ``services`` wraps it for the HTTP layer and
``api/v1/endpoints`` exposes the routes.  Versioning is handled by
grouping routers under the ``api/<version>/`` hierarchy.
"""

from .main import app  # noqa: F401
