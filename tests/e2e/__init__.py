"""
End-to-end browser tests against a deployed application.

Requires TEST_BASE_URL, TEST_USERNAME and TEST_PASSWORD.
"""
