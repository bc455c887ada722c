"""Pydantic Schemas — request/response contracts for the five resource kinds.

Invariants:
    - One module per entity kind: Entity, Create, Update, Query
    - Update inputs are fully optional; only fields the caller sent are applied
    - Query inputs are opaque to the gateway (passed through to the engine)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
