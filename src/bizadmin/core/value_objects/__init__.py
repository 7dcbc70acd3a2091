"""Value objects shared across features."""

from .address import Address

__all__ = ["Address"]
