"""Service layer — operations returning ServiceResult.

Services may import from domain, infrastructure, and config layers.
They must never import from commands or output.
"""
