"""School savings balance, ranking and badge service."""

__version__ = "0.1.0"
