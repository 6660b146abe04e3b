"""Diabetes risk assessment runner.

Orchestrates: patient lookup -> notes lookup -> term detection -> risk rules
Each lookup happens exactly once per run. Steps are logged with trace_id
and latency; patient identity is redacted before logging.
"""

import logging
import time
import uuid
from datetime import date, datetime, timezone
from typing import Callable, Iterable

from services.assessment.src.assessment.core.errors import AssessmentError, PatientNotFoundError
from services.assessment.src.assessment.core.redaction import redact_dict
from services.assessment.src.assessment.domains.diabetes.rules import matching_rule
from services.assessment.src.assessment.domains.diabetes.schemas import (
    AssessmentResult,
    Note,
    PatientRecord,
    PatientSnapshot,
    RiskEvaluation,
)
from services.assessment.src.assessment.domains.diabetes.terms import find_trigger_terms
from services.assessment.src.assessment.schemas.enums import RiskLevel

logger = logging.getLogger(__name__)

PatientFn = Callable[[int], PatientRecord]
NotesFn = Callable[[int], list[Note]]


def combine_notes_text(notes: Iterable[Note]) -> str:
    """Join note bodies with single spaces, in collection order."""
    return " ".join(n.note for n in notes if n.note)


def evaluate_risk(snapshot: PatientSnapshot, notes: Iterable[Note]) -> RiskEvaluation:
    """Run term detection and risk rules. No I/O."""
    terms = find_trigger_terms(combine_notes_text(notes))
    rule = matching_rule(snapshot.age, snapshot.gender, len(terms))

    return RiskEvaluation(
        risk_level=rule.result if rule else RiskLevel.NONE,
        trigger_term_count=len(terms),
        trigger_terms=terms,
        rule=rule.name if rule else None,
    )


def _elapsed_ms(t0: float) -> int:
    return int((time.monotonic() - t0) * 1000)


def run_assessment(
    patient_id: int,
    *,
    patient_fn: PatientFn | None = None,
    notes_fn: NotesFn | None = None,
    today: date | None = None,
    now: datetime | None = None,
) -> AssessmentResult:
    """Assess one patient's diabetes risk.

    Lookup functions are injectable for testing. When None, uses the HTTP
    adapters. `today` fixes the reference date for age; `now` fixes the
    result timestamp.

    PatientNotFoundError and CollaboratorError propagate to the caller.
    """
    from services.assessment.src.assessment.adapters.notes_api import fetch_notes as default_notes
    from services.assessment.src.assessment.adapters.patient_api import fetch_patient as default_patient

    patient_fn = patient_fn or default_patient
    notes_fn = notes_fn or default_notes

    trace_id = str(uuid.uuid4())
    logger.info("assessment_started", extra={"patient_id": patient_id, "trace_id": trace_id})

    # --------------- Step 1: Patient lookup ---------------
    t0 = time.monotonic()
    try:
        patient = patient_fn(patient_id)
    except PatientNotFoundError:
        logger.warning("assessment_patient_not_found", extra={
            "patient_id": patient_id, "trace_id": trace_id,
        })
        raise
    except AssessmentError as exc:
        logger.error("assessment_patient_lookup_failed", extra={
            "patient_id": patient_id, "trace_id": trace_id, "error": str(exc),
        })
        raise
    logger.debug("patient_lookup", extra={
        "trace_id": trace_id,
        "latency_ms": _elapsed_ms(t0),
        "patient": redact_dict(patient.model_dump(by_alias=True, mode="json")),
    })

    # --------------- Step 2: Notes lookup ---------------
    t0 = time.monotonic()
    try:
        notes = notes_fn(patient_id)
    except AssessmentError as exc:
        logger.error("assessment_notes_lookup_failed", extra={
            "patient_id": patient_id, "trace_id": trace_id, "error": str(exc),
        })
        raise
    logger.debug("notes_lookup", extra={
        "trace_id": trace_id, "latency_ms": _elapsed_ms(t0), "notes_count": len(notes),
    })

    # --------------- Step 3: Terms + rules ---------------
    t0 = time.monotonic()
    today = today or date.today()
    snapshot = PatientSnapshot.from_record(patient, today)
    evaluation = evaluate_risk(snapshot, notes)

    logger.debug("risk_rules", extra={
        "trace_id": trace_id,
        "latency_ms": _elapsed_ms(t0),
        "age": snapshot.age,
        "gender": snapshot.gender.value,
        "trigger_term_count": evaluation.trigger_term_count,
        "rule": evaluation.rule or "fallthrough",
    })

    result = AssessmentResult(
        patient_id=patient.id,
        patient_name=patient.full_name,
        patient_age=max(snapshot.age, 0),
        patient_gender=patient.gender,
        risk_level=evaluation.risk_level,
        risk_description=evaluation.risk_level.description,
        trigger_term_count=evaluation.trigger_term_count,
        trigger_terms=evaluation.trigger_terms,
        assessed_at=now or datetime.now(timezone.utc),
    )

    logger.info("assessment_complete", extra={
        "patient_id": patient_id,
        "trace_id": trace_id,
        "risk_level": result.risk_level.value,
        "trigger_term_count": result.trigger_term_count,
    })

    return result
