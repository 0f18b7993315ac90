"""Utility functions and helpers."""

from .logging import setup_observability
from .reporter import OutputReporter

__all__ = ["setup_observability", "OutputReporter"]
