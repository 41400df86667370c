"""Dog Service — CRUD API over a single Dog resource.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
