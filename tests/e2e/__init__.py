"""
Browser test package.

This package contains Playwright-based browser tests and demonstrates:
- Page Object Model (POM) pattern
- Verifying client-side persistence through localStorage
- Role, placeholder and data-testid locator strategies
"""
