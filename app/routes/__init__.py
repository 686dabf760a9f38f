"""
Routes package for the fixture table application.

This package contains route blueprints:
- api: JSON endpoints (health, saved filters)
- views: HTML pages (sign-in, dashboard, table views)
"""
