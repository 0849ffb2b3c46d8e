"""Core infrastructure: settings, logging, errors and storage."""
