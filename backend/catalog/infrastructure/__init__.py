"""Infrastructure Layer — database access, the SQL collaborator and logging.

Invariants:
    - Infrastructure never leaks SQLAlchemy exceptions (mapped to core/errors.py)
"""
