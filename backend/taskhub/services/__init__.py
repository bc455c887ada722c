"""Services Layer — orchestration between routes and the engine.

Invariants:
    - Services depend on core protocols, never on a concrete engine
"""
