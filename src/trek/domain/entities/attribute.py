"""Attribute catalog shared by every species."""
from __future__ import annotations

from enum import Enum


class Attribute(Enum):
    """Trait markers a species may possess; the value is the display name."""

    IMMORTAL_POWER = "ImmortalPower"
    INTELLIGENCE = "Intelligence"
    EXPERIENCE = "Experience"
    DISPOSITION = "Disposition"
    TECHNICAL_EXPERTISE = "TechnicalExpertise"
    FIGHTING_SKILLS = "FightingSkills"
    SPIRITUALITY = "Spirituality"
    LIFE_SPAN = "LifeSpan"

    @property
    def display_name(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value
