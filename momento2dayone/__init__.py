"""Momento journal export to Day One importer."""

__version__ = "0.1.0"
