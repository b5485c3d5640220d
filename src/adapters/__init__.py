"""Adapters for the outside world: key file, HTTP transport, JSON output."""
