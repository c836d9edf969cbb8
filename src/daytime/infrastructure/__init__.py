"""Infrastructure layer — serialization adapters for the DayTime value.

Adapters depend on the domain layer and third-party libs (SQLAlchemy).
Every adapter funnels through ``format_daytime`` and ``parse``.
It must never import from services, commands, or output.
"""
