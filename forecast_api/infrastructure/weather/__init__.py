"""
Infrastructure adapters for the weather bounded context.

Each adapter implements a domain port (ABC).
"""
