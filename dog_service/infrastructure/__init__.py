"""Infrastructure — database sessions, the SQL dog repository, and logging setup.

Invariants:
    - Everything here does IO; core/ never imports from this package
"""
