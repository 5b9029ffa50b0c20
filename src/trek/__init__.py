"""Factory Method demonstration built around a species attribute taxonomy."""

__version__ = "0.1.0"
