"""OpenAI Routing Package: typed operations to transport-ready HTTP requests.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: callers import from the layer modules explicitly
"""
