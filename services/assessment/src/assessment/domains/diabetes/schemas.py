"""Pydantic schemas for diabetes risk assessment.

PatientRecord, Address and Note mirror the payloads of the patient and
notes services, which use French field names on the wire. Python-side
names are English; aliases map them.
"""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from services.assessment.src.assessment.schemas.enums import Gender, RiskLevel


class Address(BaseModel):
    """Postal address as returned by the patient service."""

    model_config = ConfigDict(populate_by_name=True)

    number: str | None = Field(None, alias="numero")
    street: str | None = Field(None, alias="rue")
    city: str | None = Field(None, alias="ville")
    postal_code: str | None = Field(None, alias="codePostal")


class PatientRecord(BaseModel):
    """Patient demographics from the patient directory."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    first_name: str = Field("", alias="prenom")
    last_name: str = Field("", alias="nom")
    birth_date: date | None = Field(None, alias="dateNaissance")
    gender: str | None = Field(None, alias="genre")
    phone: str | None = Field(None, alias="telephone")
    address: Address | None = Field(None, alias="adresse")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def age_on(self, today: date) -> int:
        """Age as current year minus birth year.

        Ignores month and day, so it can be one year off the exact elapsed
        age. Missing birth date gives 0.
        """
        if self.birth_date is None:
            return 0
        return today.year - self.birth_date.year


class Note(BaseModel):
    """A free-text practitioner note from the notes service."""

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = None
    patient_id: int | None = Field(None, alias="patId")
    patient: str = Field("", description="Patient display name")
    note: str | None = Field(None, description="Note body")
    created_date: datetime | None = Field(None, alias="createdDate")


class PatientSnapshot(BaseModel):
    """Immutable view of the demographics the risk rules need."""

    model_config = ConfigDict(frozen=True)

    age: int = Field(..., description="Whole years, negative if the birth date is in the future")
    gender: Gender = Gender.UNKNOWN

    @classmethod
    def from_record(cls, record: PatientRecord, today: date) -> PatientSnapshot:
        # Not clamped: a negative age must reach the rules, which answer None
        return cls(age=record.age_on(today), gender=Gender.parse(record.gender))


class RiskEvaluation(BaseModel):
    """Outcome of term detection + risk rules for one set of notes."""

    model_config = ConfigDict(frozen=True)

    risk_level: RiskLevel
    trigger_term_count: int = Field(..., ge=0)
    trigger_terms: list[str] = Field(default_factory=list)
    rule: str | None = Field(None, description="Name of the rule that fired")


class AssessmentResult(BaseModel):
    """Diabetes risk assessment for one patient, built fresh per request."""

    model_config = ConfigDict(frozen=True)

    patient_id: int
    patient_name: str = ""
    patient_age: int = Field(..., ge=0)
    patient_gender: str | None = Field(None, description="Gender as sent by the directory")
    risk_level: RiskLevel
    risk_description: str
    trigger_term_count: int = Field(..., ge=0)
    trigger_terms: list[str] = Field(default_factory=list)
    assessed_at: datetime
