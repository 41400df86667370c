"""Services Layer — request handlers orchestrating validation, persistence, and responses.

Invariants:
    - Handlers depend on the DogRepository protocol, never on SQLAlchemy directly
"""
