"""Domain layer: calendar arithmetic, date templates, directive scanning.

This layer depends only on the standard library.
It must never import from services, infrastructure, commands, or config.
"""
