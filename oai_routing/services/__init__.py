"""Service Layer: imperative shell around the core (settings, logging)."""
