"""GitFit - food and water tracking backend."""

__version__ = "0.3.0"
