"""Conversion engines and their data specs."""
