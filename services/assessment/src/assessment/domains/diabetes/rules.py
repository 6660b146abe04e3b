"""Deterministic diabetes risk rules.

Inputs: patient age, gender category and the number of distinct trigger
terms found in their notes. Output: one of four risk levels.

Rules are an ordered table evaluated top to bottom; the first row whose
condition holds decides the level. If no row matches, the level is NONE.

  count == 0                          -> None
  age > 30,  count 2-5                -> Borderline
  age > 30,  count 6-7                -> In Danger
  age > 30,  count 8+                 -> Early onset
  age <= 30, male,   count 3-4        -> In Danger
  age <= 30, male,   count 5+         -> Early onset
  age <= 30, female, count 4-6        -> In Danger
  age <= 30, female, count 7+         -> Early onset
  anything else                       -> None

Age 30 belongs to the young branch. An unknown gender never matches a
young row, so it falls through to None.
"""

from __future__ import annotations

from dataclasses import dataclass

from services.assessment.src.assessment.schemas.enums import Gender, RiskLevel

YOUNG_AGE_LIMIT = 30


@dataclass(frozen=True)
class RiskRule:
    """One row of the decision table."""

    name: str
    result: RiskLevel
    min_terms: int
    max_terms: int | None = None
    over_age_limit: bool | None = None  # None = any age
    gender: Gender | None = None        # None = any gender

    def applies(self, age: int, gender: Gender, term_count: int) -> bool:
        if term_count < self.min_terms:
            return False
        if self.max_terms is not None and term_count > self.max_terms:
            return False
        if self.over_age_limit is not None and (age > YOUNG_AGE_LIMIT) != self.over_age_limit:
            return False
        if self.gender is not None and gender != self.gender:
            return False
        return True


RISK_RULES: tuple[RiskRule, ...] = (
    RiskRule("no_trigger_terms", RiskLevel.NONE, min_terms=0, max_terms=0),

    # Over 30, gender does not matter
    RiskRule("over_30_borderline", RiskLevel.BORDERLINE,
             min_terms=2, max_terms=5, over_age_limit=True),
    RiskRule("over_30_in_danger", RiskLevel.IN_DANGER,
             min_terms=6, max_terms=7, over_age_limit=True),
    RiskRule("over_30_early_onset", RiskLevel.EARLY_ONSET,
             min_terms=8, over_age_limit=True),

    # 30 and under, men
    RiskRule("young_male_in_danger", RiskLevel.IN_DANGER,
             min_terms=3, max_terms=4, over_age_limit=False, gender=Gender.MALE),
    RiskRule("young_male_early_onset", RiskLevel.EARLY_ONSET,
             min_terms=5, over_age_limit=False, gender=Gender.MALE),

    # 30 and under, women
    RiskRule("young_female_in_danger", RiskLevel.IN_DANGER,
             min_terms=4, max_terms=6, over_age_limit=False, gender=Gender.FEMALE),
    RiskRule("young_female_early_onset", RiskLevel.EARLY_ONSET,
             min_terms=7, over_age_limit=False, gender=Gender.FEMALE),
)


def matching_rule(age: int, gender: Gender, term_count: int) -> RiskRule | None:
    """Return the first rule that applies, or None when nothing matches.

    Negative age or count are outside the contract and match nothing.
    """
    if age < 0 or term_count < 0:
        return None
    for rule in RISK_RULES:
        if rule.applies(age, gender, term_count):
            return rule
    return None


def classify(age: int, gender: Gender, term_count: int) -> RiskLevel:
    """Map age, gender and distinct trigger-term count to a risk level."""
    rule = matching_rule(age, gender, term_count)
    return rule.result if rule else RiskLevel.NONE
