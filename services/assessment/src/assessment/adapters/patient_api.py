"""Patient directory adapter: GET /api/v1/patients/{id}."""

import logging

import httpx
from pydantic import ValidationError

from services.assessment.src.assessment.adapters.http_client import build_client, decode_json, get
from services.assessment.src.assessment.config import settings
from services.assessment.src.assessment.core.errors import (
    CollaboratorError,
    PatientNotFoundError,
)
from services.assessment.src.assessment.domains.diabetes.schemas import PatientRecord

logger = logging.getLogger(__name__)

SERVICE = "patient"


def fetch_patient(patient_id: int, client: httpx.Client | None = None) -> PatientRecord:
    """Fetch one patient's demographics.

    Raises PatientNotFoundError on 404 and CollaboratorError on anything
    else that is not a valid patient payload.
    """
    if client is None:
        with build_client(settings.patient_api_url) as owned:
            return fetch_patient(patient_id, owned)

    response = get(client, f"/api/v1/patients/{patient_id}", SERVICE)
    if response.status_code == 404:
        logger.info("patient_not_found", extra={"patient_id": patient_id})
        raise PatientNotFoundError(patient_id)

    try:
        return PatientRecord.model_validate(decode_json(response, SERVICE))
    except ValidationError as exc:
        raise CollaboratorError(SERVICE, f"invalid patient payload: {exc.error_count()} errors") from exc
