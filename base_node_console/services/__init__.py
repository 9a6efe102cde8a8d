"""Services Layer: command handlers, dispatch, and the line-editor helper.

Invariants:
    - Handlers split by concern (max 2 methods each)
    - Command dispatch uses explicit dict mapping (no auto-discovery)
"""
