"""PONHUB.SE comment board service."""

__version__ = "0.1.0"
