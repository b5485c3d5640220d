"""Core: configuration, errors, logging and lookup services."""
