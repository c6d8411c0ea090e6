"""Console output adapters."""

from ecotrip.display.console import Console

__all__ = ["Console"]
