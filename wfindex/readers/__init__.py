"""File access capabilities."""

from .base import FileReader
from .local import LocalFileReader

__all__ = ["FileReader", "LocalFileReader"]
