"""Lookup services.

Pure logic (encoding, verdicts) plus the orchestration that ties them to the
HTTP adapter. No printing here.
"""
