"""
Page Object Model (POM) classes for UI testing.

This package contains page objects that encapsulate page-specific
locators and interactions. The POM pattern provides:
- Separation of test logic from page details
- Reusable page interactions
- Maintainable test code (changes to UI only require updates in one place)
"""

from tests.pages.base_page import BasePage, PageActionError
from tests.pages.playwright_home_page import PlaywrightHomePage
from tests.pages.todo_page import TodoPage

__all__ = ["BasePage", "PageActionError", "PlaywrightHomePage", "TodoPage"]
