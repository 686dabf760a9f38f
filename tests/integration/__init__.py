"""
Integration tests for the fixture application.

Tests use the Flask test client and cover:
- Sign-in and bearer issuance
- Saved filters and the reset endpoint
- Input validation on the filter API
"""
