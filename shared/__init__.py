"""Helpers shared by the catalog test suites and the E2E runner."""
