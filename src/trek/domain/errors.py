"""Domain-level exceptions."""


class SpeciesInvariantError(RuntimeError):
    """Raised when a species finishes construction without attributes."""
