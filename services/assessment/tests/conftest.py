"""Pytest configuration and shared fixtures.

All tests are unit tests: collaborators are replaced by stub callables
or httpx.MockTransport, so nothing touches the network.
"""

import os
from datetime import date, datetime, timezone

import pytest

from services.assessment.src.assessment.domains.diabetes.schemas import Note, PatientRecord

# Reference date for ages: current year minus birth year
REFERENCE_DATE = date(2024, 6, 1)


def pytest_configure(config):
    """Configure test environment before collection."""
    os.environ.setdefault("PATIENT_API_URL", "http://patient.test")
    os.environ.setdefault("NOTES_API_URL", "http://notes.test")


def _note(note_id: str, patient_id: int, body: str) -> Note:
    return Note(
        id=note_id,
        patient_id=patient_id,
        patient="Test",
        note=body,
        created_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


# =============================================================================
# Reference patients: one per risk level
# =============================================================================

@pytest.fixture
def reference_date() -> date:
    return REFERENCE_DATE


@pytest.fixture
def patient_none() -> PatientRecord:
    return PatientRecord(id=1, first_name="Test", last_name="TestNone",
                         birth_date=date(1966, 12, 31), gender="F", phone="100-222-3333")


@pytest.fixture
def notes_none() -> list[Note]:
    return [
        _note("1", 1, "Le patient déclare qu'il 'se sent très bien' "
                      "Poids égal ou inférieur au poids recommandé"),
    ]


@pytest.fixture
def patient_borderline() -> PatientRecord:
    return PatientRecord(id=2, first_name="Test", last_name="TestBorderline",
                         birth_date=date(1945, 6, 24), gender="M", phone="200-333-4444")


@pytest.fixture
def notes_borderline() -> list[Note]:
    return [
        _note("2a", 2, "Le patient déclare qu'il ressent beaucoup de stress au travail "
                       "Il se plaint également que son audition est anormale dernièrement"),
        _note("2b", 2, "Le patient déclare avoir fait une réaction aux médicaments au cours "
                       "des 3 derniers mois Il remarque également que son audition continue "
                       "d'être anormale"),
    ]


@pytest.fixture
def patient_in_danger() -> PatientRecord:
    return PatientRecord(id=3, first_name="Test", last_name="TestInDanger",
                         birth_date=date(2004, 6, 18), gender="M", phone="300-444-5555")


@pytest.fixture
def notes_in_danger() -> list[Note]:
    return [
        _note("3a", 3, "Le patient déclare qu'il fume depuis peu"),
        _note("3b", 3, "Le patient déclare qu'il est fumeur et qu'il a cessé de fumer "
                       "l'année dernière Il se plaint également de crises d'apnée "
                       "respiratoire anormales Tests de laboratoire indiquant un taux de "
                       "cholestérol LDL élevé"),
    ]


@pytest.fixture
def patient_early_onset() -> PatientRecord:
    return PatientRecord(id=4, first_name="Test", last_name="TestEarlyOnset",
                         birth_date=date(2002, 6, 28), gender="F", phone="400-555-6666")


@pytest.fixture
def notes_early_onset() -> list[Note]:
    return [
        _note("4a", 4, "Le patient déclare qu'il lui est devenu difficile de monter les "
                       "escaliers Il se plaint également d'être essoufflé Tests de "
                       "laboratoire indiquant que les anticorps sont élevés "
                       "Réaction aux médicaments"),
        _note("4b", 4, "Le patient déclare qu'il a mal au dos lorsqu'il reste assis "
                       "pendant longtemps"),
        _note("4c", 4, "Le patient déclare avoir commencé à fumer depuis peu "
                       "Hémoglobine A1C supérieure au niveau recommandé"),
        _note("4d", 4, "Taille, Poids, Cholestérol, Vertige et Réaction"),
    ]
