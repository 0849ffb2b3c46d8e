"""
Pydantic schema definitions for API payloads.

Schemas describe what clients send and what the service writes.  Data
read back from the store is returned as stored, so records written by
other tools are passed through untouched.
"""
