"""Modular cabinet layout configurator."""

__version__ = "0.1.0"
