"""
Test suite for the product catalog and its E2E harness.

This package contains:
- unit/: Page object lifecycle, accessor queue and process runner tests
- integration/: Flask view and API tests using the test client
- e2e/: Browser tests using Playwright and the page objects
- mocks/: In-memory browser session used by the unit tests
"""
