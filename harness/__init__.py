"""
Filter-table harness.

Polling helpers and page objects for checking the filterable table views
(assets, loggers, shipments) of the application under test.
"""
