"""
Forecast API: synthetic weather forecasts over HTTP.

Application package root. A small modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - weather: Forecast generation, request validation, domain errors.

Layers:
    - domain: Error taxonomy, validation rules engine, entities, ports.
    - application: Use cases, DTOs, forecast request rule set.
    - infrastructure: Adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (problem responses, tracing, logging).
"""
