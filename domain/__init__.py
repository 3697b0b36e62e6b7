"""
Domain layer for the class scheduling service.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""
