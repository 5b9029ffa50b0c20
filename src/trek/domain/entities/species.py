"""Species creators and their attribute factory step."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, List

from trek.domain.errors import SpeciesInvariantError

from .attribute import Attribute


class Species(ABC):
    """Base creator; subclasses decide which attributes a species has.

    The constructor runs ``create_attributes`` and then checks that the
    attribute list was filled in. After that the list is never reassigned.
    """

    species_id: ClassVar[str]

    def __init__(self) -> None:
        self._attributes: List[Attribute] | None = None
        self.create_attributes()
        if not self._attributes:
            raise SpeciesInvariantError(
                f"{type(self).__name__} created no attributes."
            )

    @abstractmethod
    def create_attributes(self) -> None:
        """Populate ``self._attributes`` for this species."""

    @property
    def attributes(self) -> tuple[Attribute, ...]:
        """Read-only view of the attributes produced at construction."""
        assert self._attributes is not None
        return tuple(self._attributes)

    def __str__(self) -> str:
        return type(self).__name__

    def __repr__(self) -> str:
        names = ", ".join(attribute.display_name for attribute in self.attributes)
        return f"{type(self).__name__}([{names}])"


class Immortal(Species):
    """Beings beyond mortality such as the Q Continuum."""

    species_id = "immortal"

    def create_attributes(self) -> None:
        self._attributes = [
            Attribute.IMMORTAL_POWER,
            Attribute.INTELLIGENCE,
            Attribute.EXPERIENCE,
        ]


class Mortal(Species):
    species_id = "mortal"

    def create_attributes(self) -> None:
        self._attributes = [
            Attribute.DISPOSITION,
            Attribute.TECHNICAL_EXPERTISE,
            Attribute.FIGHTING_SKILLS,
            Attribute.SPIRITUALITY,
            Attribute.LIFE_SPAN,
        ]
