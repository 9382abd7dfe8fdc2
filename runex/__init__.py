"""Resolve and launch examples bundled in a multi-module Maven build."""

__version__ = "0.1.0"
