"""Inkwell access control: role-based permissions for the publishing platform."""

__version__ = "0.1.0"
