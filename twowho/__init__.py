"""A minimal TCP server that prints each request and answers with a greeting."""

__version__ = "0.1.0"
__all__ = ["__version__"]