"""
Routes package for the product catalog application.

This package contains route blueprints:
- api: JSON endpoints (health probe, catalog data)
- views: HTML page routes for the web interface
"""
