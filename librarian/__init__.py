"""Library management: a book catalogue, loans and member registration."""

__version__ = "0.1.0"