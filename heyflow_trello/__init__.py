"""Heyflow to Trello webhook adapter."""

__version__ = "0.1.0"
