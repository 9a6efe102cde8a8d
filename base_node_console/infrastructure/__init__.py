"""Infrastructure Layer: execution and logging plumbing around the core.

Invariants:
    - Infrastructure never imports from services/
    - Nothing here knows about individual commands
"""
