"""
Domain layer - Record types and domain errors.

This layer contains the records persisted by the repositories and the
exceptions raised by the persistence layer, independent of any storage
backend.
"""
