"""
In-memory stand-ins for the browser layer.

The fakes implement the same interface as ``tests.e2e.pages.session`` so
page objects can be exercised without launching a browser.
"""
