"""REST API for recipe and book collections with a small user registry."""

__version__ = "0.1.0"
