"""
Application layer for the weather bounded context.

Use cases coordinate validation, domain entities and ports.
No framework or infrastructure imports allowed.
"""
