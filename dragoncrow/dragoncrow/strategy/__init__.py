"""Automatic player strategies."""

from .base import Strategy
from .simple import SimpleStrategy

__all__ = ["Strategy", "SimpleStrategy"]
