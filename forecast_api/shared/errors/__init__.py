"""
Shared error handling package.

Centralizes error-to-HTTP translation so that domain errors
are consistently rendered as problem responses.
"""
