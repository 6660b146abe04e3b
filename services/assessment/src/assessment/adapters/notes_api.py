"""Notes service adapter: GET /api/v1/notes/patient/{patId}."""

import httpx
from pydantic import TypeAdapter, ValidationError

from services.assessment.src.assessment.adapters.http_client import build_client, decode_json, get
from services.assessment.src.assessment.config import settings
from services.assessment.src.assessment.core.errors import CollaboratorError
from services.assessment.src.assessment.domains.diabetes.schemas import Note

SERVICE = "notes"

_NOTES = TypeAdapter(list[Note])


def fetch_notes(patient_id: int, client: httpx.Client | None = None) -> list[Note]:
    """Fetch all notes for a patient, in the order the service returns them."""
    if client is None:
        with build_client(settings.notes_api_url) as owned:
            return fetch_notes(patient_id, owned)

    path = f"/api/v1/notes/patient/{patient_id}"
    response = get(client, path, SERVICE)
    if response.status_code == 404:
        raise CollaboratorError(SERVICE, f"HTTP 404 on {path}")

    try:
        return _NOTES.validate_python(decode_json(response, SERVICE))
    except ValidationError as exc:
        raise CollaboratorError(SERVICE, f"invalid notes payload: {exc.error_count()} errors") from exc
