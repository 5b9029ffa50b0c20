"""Factory helpers for species entities."""

from .species_factory import (
    SPECIES_BUILDERS,
    SpeciesBuilder,
    create_species,
    create_species_roster,
    species_ids,
)

__all__ = [
    "SPECIES_BUILDERS",
    "SpeciesBuilder",
    "create_species",
    "create_species_roster",
    "species_ids",
]
