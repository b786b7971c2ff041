"""Core: domain models, contracts, configuration and the request executor."""
