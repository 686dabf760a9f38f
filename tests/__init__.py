"""
Test suite for the filter-table harness.

This package contains:
- unit/: Harness logic against fake pages, no browser
- integration/: Fixture application through the Flask test client
- ui/: Playwright tests against the fixture application
- e2e/: Playwright tests against a deployed application
"""
