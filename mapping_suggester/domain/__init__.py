"""Domain layer for the mapping suggester.

This layer contains the core matching logic and domain entities.
It is independent of external frameworks and infrastructure.
"""
