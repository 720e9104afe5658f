"""Discord keep-alive command bot."""

__version__ = "0.1.0"
