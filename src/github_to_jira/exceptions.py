"""
Custom exception classes for the GitHub to Jira conversion tool.
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base exception for conversion errors."""


class ConfigurationError(ConversionError):
    """Raised when the converter configuration is missing or invalid."""
