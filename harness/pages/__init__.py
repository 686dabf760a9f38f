"""
Page Object Model (POM) classes for the application under test.

Only thin glue lives here: navigation and sign-in. Filter and table
behaviour is shared through :mod:`harness.filter_tables`.
"""

from harness.pages.base_page import BasePage
from harness.pages.login_page import LoginPage
from harness.pages.main_page import MainPage
from harness.pages.table_view_page import TableViewPage

__all__ = ["BasePage", "LoginPage", "MainPage", "TableViewPage"]
