"""Domain layer — the DayTime value, its errors, and anchoring rules.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
