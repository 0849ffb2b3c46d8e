"""
Version 1 of the API.

This subpackage bundles the collection and mailing list endpoints.
"""
