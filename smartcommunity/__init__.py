"""Residential community records on SQLite: users, owners, parking, property documents and payments."""

__version__ = "0.1.0"