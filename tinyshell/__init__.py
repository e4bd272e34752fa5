"""Parsing for a small command shell: line checks, variable expansion, tokens and pipeline commands."""

__version__ = "0.1.0"
__all__ = ["__version__"]