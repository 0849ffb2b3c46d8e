"""
Service layer abstraction.

Services hold the business logic and talk to a ``Store`` handed in by
the caller, so API handlers never touch the data file directly and
tests can swap the file for an in‑memory fake.
"""
