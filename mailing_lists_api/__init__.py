"""
Top‑level package for the Mailing Lists API.

This file makes ``mailing_lists_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``mailing_lists_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
