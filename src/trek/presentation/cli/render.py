"""Console rendering for species rosters."""
from __future__ import annotations

from typing import Iterable

from trek.services import SpeciesView


def format_species_lines(view: SpeciesView, *, debug: bool = False) -> list[str]:
    """Return the heading, one indented line per attribute, and a blank separator."""
    lines: list[str] = []
    if debug:
        lines.append(f"[{view.species_id}]")
    lines.append(f"{view.name}--")
    lines.extend(f" {name}" for name in view.attribute_names)
    lines.append("")
    return lines


def render_roster(views: Iterable[SpeciesView], *, debug: bool = False) -> None:
    """Print every species in roster order."""
    for view in views:
        for line in format_species_lines(view, debug=debug):
            print(line)
