"""Test fixtures for vstoolsets tests.

This package provides reusable pytest fixtures for testing vstoolsets
components:

- installations: Visual Studio directory layouts and vswhere reports

Import fixtures in your tests using:
    from tests.fixtures.installations import machine, install_vs2017
"""

__all__ = [
    "installations",
]
