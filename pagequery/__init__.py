"""Paginated listing service for board, community and mall backends."""

__version__ = "0.1.0"
