"""Core Layer: command vocabulary, validation and value types. No IO, no async.

Invariants:
    - No module in core/ imports from services/ or infrastructure/
    - Backend contracts are Protocols; implementations are injected by the host

Design Decisions:
    - Parsing and validation are pure functions so they can be tested without
      a dispatcher, a runner or a backend
"""
