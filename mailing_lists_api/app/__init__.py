"""
Application package initializer.

The project is split into a handful of small pieces: ``core`` holds
configuration, logging, error types and the flat file store;
``schemas`` holds the Pydantic payload models; ``services`` holds the
mailing list operations; and ``api`` exposes them over HTTP.  Routes
are grouped under ``api/<version>/`` even though version 1 is mounted
at the application root to keep the public paths stable.
"""

from .main import app  # noqa: F401
