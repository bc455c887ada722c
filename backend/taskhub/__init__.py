"""TaskHub Gateway — authenticated CRUD gateway for tasks, projects, members, teams, labels.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
