"""
Trip hotspots package.

This package contains:
- pipeline: line parsing, trip aggregation, ingestion and reports
- config: default paths and the trip record layout
- cli: command line entry point.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("trip-hotspots")
except PackageNotFoundError:  # pragma: no cover - package not installed
    __version__ = "0.0.0"
