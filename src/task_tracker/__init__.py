"""In-memory task tracker served over HTTP."""

__version__ = "0.1.0"
