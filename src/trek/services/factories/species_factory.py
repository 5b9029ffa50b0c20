"""Factory for creating species from registry ids."""
from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List

from trek.domain.entities import Immortal, Mortal, Species
from trek.services.errors import FactoryError

logger = logging.getLogger(__name__)

SpeciesBuilder = Callable[[], Species]

# New species are added here alongside their Species subclass.
SPECIES_BUILDERS: Dict[str, SpeciesBuilder] = {
    Immortal.species_id: Immortal,
    Mortal.species_id: Mortal,
}


def species_ids() -> List[str]:
    """Return registered species ids in declaration order."""
    return list(SPECIES_BUILDERS)


def create_species(species_id: str) -> Species:
    """Instantiate the species registered under ``species_id``."""
    try:
        builder = SPECIES_BUILDERS[species_id]
    except KeyError as exc:
        raise FactoryError(f"Species '{species_id}' not found.") from exc

    species = builder()
    logger.debug("Created %s with %d attributes", species, len(species.attributes))
    return species


def create_species_roster(ids: Iterable[str]) -> List[Species]:
    """Instantiate one species per id, preserving order."""
    return [create_species(species_id) for species_id in ids]
