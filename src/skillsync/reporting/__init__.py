"""Output formatting for sync results."""

from .json_output import render_json
from .stdout import StdoutReporter

__all__ = ["StdoutReporter", "render_json"]
