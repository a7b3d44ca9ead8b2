"""
GitHub to Jira Conversion Tool

Converts the issues and comments of a GitHub repository into a Jira JSON
import file, mapping labels to issue types, priorities and custom fields.
"""

from __future__ import annotations

from .cli import main
from .config import ConverterConfig, FieldSpec, load_config
from .converter import convert, convert_records, run
from .exceptions import ConfigurationError, ConversionError
from .issue_mapper import IssueMapper
from .label_classifier import LabelClassifier
from .utils import setup_logging

# Package version
__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "ConversionError",
    "ConverterConfig",
    "FieldSpec",
    "IssueMapper",
    "LabelClassifier",
    "convert",
    "convert_records",
    "load_config",
    "main",
    "run",
    "setup_logging",
]
