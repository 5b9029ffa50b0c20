"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a species cannot be created."""
