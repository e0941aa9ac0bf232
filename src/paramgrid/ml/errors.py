from __future__ import annotations


class InvalidRange(ValueError):
    """Raised when a grid's bounds or step cannot describe a search range."""
