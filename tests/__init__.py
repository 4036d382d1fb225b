"""Test suite for the DOI metadata fetcher.

This package contains unit tests covering DOI encoding, Crossref response
parsing and the HTTP client, plus end-to-end tests through a mocked
transport. To run the tests, execute `pytest` from the project root.
"""
