"""Cross-platform process liveness, termination, and shell resolution."""

__version__ = "0.1.0"
