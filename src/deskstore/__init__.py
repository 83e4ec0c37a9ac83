"""deskstore — local settings persistence for desktop applications."""

__version__ = "0.1.0"
