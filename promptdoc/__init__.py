"""Prompt template rendering and schema documentation for prompt data types."""

__version__ = "0.1.0"

__all__ = ["__version__"]
