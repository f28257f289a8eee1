"""Domain layer — dough models, timelines, and recipe parameters.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
