"""Infrastructure Layer — database sessions, reference engine, credential store, logging.

Invariants:
    - SQLAlchemy failures are mapped to StorageError before leaving this layer
"""
