"""Deterministic trigger-term detection in practitioner notes.

How it works:
  1. All notes for a patient are joined into one text
  2. THIS FILE lower-cases that text and looks for each vocabulary term
  3. A term counts once if it appears at least once, however many times
  4. The number of distinct terms found feeds the risk rules

Matching is plain substring search: no tokenization, no word boundaries.
It is case-insensitive but accent-sensitive ("cholesterol" without the
accent does not match "Cholestérol").
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class TriggerTerm:
    """A canonical vocabulary entry.

    With no stem, the label itself is searched for. With a stem, the
    shorter stem is searched for instead so that grammatical variants
    (plurals, feminine forms, verb forms) also match.
    """

    label: str
    stem: str | None = None

    @property
    def pattern(self) -> str:
        return _normalize(self.stem or self.label)

    def matches(self, normalized_text: str) -> bool:
        return self.pattern in normalized_text


# ---------------------------------------------------------------------------
# Vocabulary
#
# Stems are curated so that no pattern contains another: one piece of note
# text can only ever be credited to a single canonical term.
# ---------------------------------------------------------------------------

TRIGGER_TERMS: tuple[TriggerTerm, ...] = (
    TriggerTerm("Hémoglobine A1C"),
    TriggerTerm("Microalbumine"),
    TriggerTerm("Taille"),
    TriggerTerm("Poids"),
    TriggerTerm("Fumeur", stem="fum"),          # fume, fumer, fumeur, fumeuse
    TriggerTerm("Anormal", stem="anorma"),      # anormal, anormale, anormales, anormaux
    TriggerTerm("Cholestérol"),
    TriggerTerm("Vertiges", stem="vertige"),    # vertige, vertiges
    TriggerTerm("Rechute"),
    TriggerTerm("Réaction"),
    TriggerTerm("Anticorps"),
)


def _normalize(text: str) -> str:
    # NFC so that "é" typed as e + combining accent still equals "é"
    return unicodedata.normalize("NFC", text).lower()


def validate_vocabulary(terms: Iterable[TriggerTerm]) -> None:
    """Raise ValueError if two terms could match the same text.

    A pattern equal to, or contained in, another term's pattern would let
    one occurrence count for both terms.
    """
    terms = list(terms)
    for i, term in enumerate(terms):
        if not term.pattern.strip():
            raise ValueError(f"Trigger term '{term.label}' has an empty pattern")
        for other in terms[i + 1:]:
            if term.pattern in other.pattern or other.pattern in term.pattern:
                raise ValueError(
                    f"Trigger terms '{term.label}' and '{other.label}' overlap "
                    f"('{term.pattern}' / '{other.pattern}')"
                )


validate_vocabulary(TRIGGER_TERMS)


def get_trigger_terms() -> list[str]:
    """Return the canonical labels of the vocabulary."""
    return [term.label for term in TRIGGER_TERMS]


def find_trigger_terms(text: str | None) -> list[str]:
    """Return the labels of the terms present in text, in vocabulary order."""
    if not text:
        return []

    normalized = _normalize(text)
    return [term.label for term in TRIGGER_TERMS if term.matches(normalized)]


def count_distinct_trigger_terms(text: str | None) -> int:
    """Count vocabulary terms appearing at least once in text.

    Each term contributes at most 1, so the result never exceeds
    len(TRIGGER_TERMS). Empty or missing text gives 0.
    """
    return len(find_trigger_terms(text))
