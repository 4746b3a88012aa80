"""Application configuration helpers."""

from __future__ import annotations

from .errors import ConfigurationError
from .extraction import ExtractionConfig, get_extraction_config
from .filtering import FilterConfig, get_filter_config
from .ingest import IngestConfig, get_ingest_config
from .logging import configure_logging
from .missing import MissingConfig, get_missing_config
from .output import OutputConfig, OutputFormat, get_output_config

__all__ = [
    "ConfigurationError",
    "ExtractionConfig",
    "FilterConfig",
    "IngestConfig",
    "MissingConfig",
    "OutputConfig",
    "OutputFormat",
    "configure_logging",
    "get_extraction_config",
    "get_filter_config",
    "get_ingest_config",
    "get_missing_config",
    "get_output_config",
]
