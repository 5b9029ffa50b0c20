"""Tests for CLI rendering utilities."""
from trek.domain.entities import Immortal, Mortal
from trek.presentation.cli.render import format_species_lines, render_roster
from trek.services import SpeciesService, SpeciesView

_EXPECTED_OUTPUT = (
    "Immortal--\n"
    " ImmortalPower\n"
    " Intelligence\n"
    " Experience\n"
    "\n"
    "Mortal--\n"
    " Disposition\n"
    " TechnicalExpertise\n"
    " FightingSkills\n"
    " Spirituality\n"
    " LifeSpan\n"
    "\n"
)


def test_format_species_lines_heading_attributes_and_separator() -> None:
    view = SpeciesView(species_id="immortal", name="Immortal", attribute_names=("A", "B"))
    assert format_species_lines(view) == ["Immortal--", " A", " B", ""]


def test_format_species_lines_debug_prefixes_species_id() -> None:
    view = SpeciesView(species_id="mortal", name="Mortal", attribute_names=("LifeSpan",))
    assert format_species_lines(view, debug=True) == ["[mortal]", "Mortal--", " LifeSpan", ""]


def test_render_roster_matches_expected_output(capsys) -> None:
    views = [SpeciesService.describe(species) for species in (Immortal(), Mortal())]
    render_roster(views)
    assert capsys.readouterr().out == _EXPECTED_OUTPUT


def test_render_roster_empty_prints_nothing(capsys) -> None:
    render_roster([])
    assert capsys.readouterr().out == ""
