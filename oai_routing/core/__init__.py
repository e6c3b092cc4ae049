"""Core Layer: pure routing logic, no IO, no logging, no settings.

Invariants:
    - No module in core/ imports from services/, infrastructure/, or config
    - All functions are pure and deterministic for their inputs
"""
