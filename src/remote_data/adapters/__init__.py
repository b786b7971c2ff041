"""Adapters: concrete I/O and process-level collaborators of the core."""
