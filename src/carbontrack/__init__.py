"""Emissions accounting engine."""

from carbontrack.logging import setup_logging

__version__ = "0.1.0"

__all__ = ["setup_logging"]
