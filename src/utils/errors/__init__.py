"""Exceções utilitárias compartilhadas."""

from .exceptions import InvalidArgumentError

__all__ = [
    "InvalidArgumentError",
]
