"""Service layer exports."""

from .errors import FactoryError
from .species_service import DEFAULT_ROSTER, SpeciesService, SpeciesView

__all__ = [
    "DEFAULT_ROSTER",
    "FactoryError",
    "SpeciesService",
    "SpeciesView",
]
