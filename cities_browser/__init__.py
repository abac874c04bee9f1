"""
Top-level package for the 500 Cities health browser.

This package exposes the core architecture (domain, views, UI adapters).
Most code should import from submodules such as:
    cities_browser.core
    cities_browser.views
    cities_browser.ui
"""

__all__: list[str] = []
