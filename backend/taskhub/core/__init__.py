"""Core Layer — pure gateway logic: types, errors, registry, ownership, shaping.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or models/
    - Engine and credential store reached only through engine_protocols
"""
