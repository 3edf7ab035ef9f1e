"""Custom garage blueprints: codec, document model and placement engine."""

__version__ = "1.0.0"
