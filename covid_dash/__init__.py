"""
Top-level package for the COVID demographics dashboard.

This package exposes the core architecture (domain, views, UI adapters).
Most code should import from submodules such as:
    covid_dash.core
    covid_dash.views
    covid_dash.ui
"""

__all__: list[str] = []
