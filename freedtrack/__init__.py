"""Thread-safe frame rings, queue nodes, texture format mapping and small utility nodes."""

__version__ = "0.1.0"