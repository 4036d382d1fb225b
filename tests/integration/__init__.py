"""Integration test package.

These tests exercise ``fetch_metadata`` end to end with the Crossref API
mocked by respx, so they do not need network access.
"""
