"""TSC vote reminder automation."""

__version__ = "0.1.0"
