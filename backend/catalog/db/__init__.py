"""Database Infrastructure — SQLAlchemy declarative base.

Invariants:
    - Single async engine per process (owned by DatabaseSessionManager)
"""
