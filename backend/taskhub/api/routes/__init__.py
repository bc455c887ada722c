"""Route Modules — health probes and the generated resource routes.

Invariants:
    - Each module defines its own APIRouter(s) with prefix and tags
    - Routes never contain business logic (delegate to the dispatcher)
"""
