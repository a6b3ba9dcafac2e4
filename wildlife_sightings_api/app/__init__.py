"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules.  Configuration and logging live in ``core``, the record
models in ``schemas``, the file loader and query functions in
``services`` and the HTTP routes in ``api/endpoints``.
"""

from .main import app  # noqa: F401
