"""
Domain layer package.

Contains pure business logic: errors, entities, validation rules,
and port interfaces. No framework imports, no IO, no side effects.
"""
