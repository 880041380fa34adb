"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error translation into problem responses
- Trace context reading
- Request correlation ids
- Logging configuration
"""
