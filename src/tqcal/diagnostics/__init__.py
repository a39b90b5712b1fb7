"""Diagnostics package.

- pretty_year: printable month grids for one Tranquility year
"""

__all__ = ["pretty_year"]
