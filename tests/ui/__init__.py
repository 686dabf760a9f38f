"""
UI tests against the local fixture application.

This package demonstrates:
- Page Object Model (POM) pattern
- Live server fixture for Playwright
- Settlement polling against delayed re-renders
"""
