"""
Weather bounded context, domain layer.

- Domain error taxonomy with stable wire codes
- Rule-based request validation
- Forecast entity and generator port
"""
