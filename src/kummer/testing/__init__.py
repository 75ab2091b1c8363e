"""Testing helpers for the confluent hypergeometric function."""

from . import strategies

__all__ = [
    "strategies",
]
