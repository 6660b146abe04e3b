"""Errors raised by the assessment flow."""


class AssessmentError(Exception):
    """Base class for assessment failures."""

    pass


class PatientNotFoundError(AssessmentError):
    """Raised when the patient directory has no patient for the given ID."""

    def __init__(self, patient_id: int):
        self.patient_id = patient_id
        super().__init__(f"Patient {patient_id} not found")


class CollaboratorError(AssessmentError):
    """Raised when the patient or notes service fails or answers garbage."""

    def __init__(self, service: str, detail: str):
        self.service = service
        self.detail = detail
        super().__init__(f"{service} service error: {detail}")
