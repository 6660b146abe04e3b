"""Shared httpx plumbing for the collaborator adapters."""

import logging
from typing import Any

import httpx

from services.assessment.src.assessment.config import settings
from services.assessment.src.assessment.core.errors import CollaboratorError

logger = logging.getLogger(__name__)


def build_client(base_url: str) -> httpx.Client:
    """Create a client for one collaborator with the configured timeout."""
    return httpx.Client(base_url=base_url, timeout=settings.http_timeout_seconds)


def get(client: httpx.Client, path: str, service: str) -> httpx.Response:
    """GET path, turning transport failures and non-404 errors into CollaboratorError.

    A 404 response is returned as-is; each adapter decides what it means.
    """
    try:
        response = client.get(path)
    except httpx.HTTPError as exc:
        logger.error("collaborator_request_failed", extra={
            "service": service, "path": path, "error": str(exc),
        })
        raise CollaboratorError(service, str(exc)) from exc

    if response.is_error and response.status_code != 404:
        logger.error("collaborator_request_failed", extra={
            "service": service, "path": path, "status_code": response.status_code,
        })
        raise CollaboratorError(service, f"HTTP {response.status_code} on {path}")

    return response


def decode_json(response: httpx.Response, service: str) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise CollaboratorError(service, f"invalid JSON on {response.request.url.path}") from exc
