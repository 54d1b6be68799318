"""A terminal chess game with human and computer players."""

__version__ = "0.1.0"