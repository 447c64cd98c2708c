"""Chorder: keyboard-driven launcher grid."""

__version__ = "0.1.0"
