"""Roster construction and display views for species."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from trek.domain.entities import Species
from trek.services.factories import create_species_roster

DEFAULT_ROSTER: tuple[str, ...] = ("immortal", "mortal")


@dataclass(frozen=True, slots=True)
class SpeciesView:
    """Presentation-friendly snapshot of a species."""

    species_id: str
    name: str
    attribute_names: tuple[str, ...]


class SpeciesService:
    """Builds the demonstration roster and describes its members."""

    def __init__(self, roster_ids: Sequence[str] = DEFAULT_ROSTER) -> None:
        self._roster_ids = tuple(roster_ids)

    @property
    def roster_ids(self) -> tuple[str, ...]:
        return self._roster_ids

    def build_roster(self) -> List[Species]:
        """Create fresh species instances for every roster id."""
        return create_species_roster(self._roster_ids)

    @staticmethod
    def describe(species: Species) -> SpeciesView:
        return SpeciesView(
            species_id=species.species_id,
            name=str(species),
            attribute_names=tuple(attribute.display_name for attribute in species.attributes),
        )

    def get_roster_view(self) -> List[SpeciesView]:
        return [self.describe(species) for species in self.build_roster()]
