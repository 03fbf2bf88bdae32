"""Utility functions for json2ts."""

from .validation import ValidationUtils

__all__ = ["ValidationUtils"]
