"""Core — pure domain types, errors and collaborator protocols.

Invariants:
    - Core NEVER imports from api/ or infrastructure/
    - No IO here; async functions only await injected collaborators
"""
