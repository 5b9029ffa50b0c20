"""Runtime entity exports."""

from .attribute import Attribute
from .species import Immortal, Mortal, Species

__all__ = [
    "Attribute",
    "Immortal",
    "Mortal",
    "Species",
]
