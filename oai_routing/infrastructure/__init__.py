"""Infrastructure Layer: logging setup and adapters to third-party transports.

Invariants:
    - Adapters convert descriptors only; nothing here opens a connection
"""
