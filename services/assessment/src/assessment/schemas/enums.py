"""Enums for diabetes risk assessment."""

from __future__ import annotations

import unicodedata
from enum import Enum


class Gender(str, Enum):
    """Gender category used by the risk rules."""
    MALE = "M"
    FEMALE = "F"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, value: str | None) -> Gender:
        """Categorize a free-form gender string. Never raises."""
        if not value:
            return cls.UNKNOWN
        token = unicodedata.normalize("NFC", value).lower()
        if token in _MALE_TOKENS:
            return cls.MALE
        if token in _FEMALE_TOKENS:
            return cls.FEMALE
        return cls.UNKNOWN


_MALE_TOKENS = {"m", "masculin", "male"}
_FEMALE_TOKENS = {"f", "féminin", "female"}


class RiskLevel(str, Enum):
    """Diabetes risk level."""
    NONE = "None"                # No trigger term, or not enough for a risk
    BORDERLINE = "Borderline"    # Over 30 with 2-5 trigger terms
    IN_DANGER = "In Danger"      # Threshold depends on age and gender
    EARLY_ONSET = "Early onset"  # Highest level

    @property
    def description(self) -> str:
        return _RISK_DESCRIPTIONS[self]


_RISK_DESCRIPTIONS = {
    RiskLevel.NONE: "Aucun risque",
    RiskLevel.BORDERLINE: "Risque limité",
    RiskLevel.IN_DANGER: "En danger",
    RiskLevel.EARLY_ONSET: "Apparition précoce",
}
