"""Quiz domain services: storage, validation and the play session engine.

This package holds the quiz logic used by socket handlers and HTTP routes,
keeping transport concerns separated from quiz mechanics.
"""
