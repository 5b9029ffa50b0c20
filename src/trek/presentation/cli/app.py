"""Console entry loop for the species demonstration."""
from __future__ import annotations

import logging

from trek.core.log import configure_logging
from trek.services import SpeciesService

from .config import CliConfig, load_config
from .render import render_roster

logger = logging.getLogger(__name__)


def main(config: CliConfig | None = None) -> None:
    """Display the species roster and wait for the user."""
    config = config or load_config()
    configure_logging(config.log_level)
    service = _build_species_service()
    logger.info("Rendering roster: %s", ", ".join(service.roster_ids))
    render_roster(service.get_roster_view(), debug=config.debug)
    if config.pause_on_exit:
        _wait_for_acknowledgement()


def _build_species_service() -> SpeciesService:
    """Construct the SpeciesService with the default roster."""
    return SpeciesService()


def _wait_for_acknowledgement() -> None:
    try:
        input()
    except EOFError:
        logger.debug("Input closed before acknowledgement")
