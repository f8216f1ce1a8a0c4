"""
Record source for the campus API.

`HttpRecordSource.fetch` performs one authenticated GET per call and validates
the payload into record models. Failures are raised as `MissingCredential` or
`FetchFailure`; nothing is retried here, a retry is a new user selection.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol, Sequence, runtime_checkable

import httpx
from pydantic import ValidationError

from report_engine.config import get_settings
from report_engine.domain.kinds import ReportKind
from report_engine.domain.models import ActivityRecord, Record, RegistrationRecord, records_from_payload
from report_engine.errors import FetchFailure, MissingCredential
from report_engine.utils.logging import get_logger

log = get_logger(__name__)

_MODELS = {
    ReportKind.USERS: RegistrationRecord,
    ReportKind.ANNOUNCEMENTS: ActivityRecord,
}


@runtime_checkable
class RecordSource(Protocol):
    """Anything that can return the records of a resource for a credential."""

    async def fetch(self, resource: str, credential: Optional[str]) -> Sequence[Record]:
        ...


def _extract_items(resource: str, payload: Any) -> List[Dict[str, Any]]:
    # /users wraps its list as {"users": [...]}; /announcements returns the list.
    if isinstance(payload, dict):
        payload = payload.get(resource)
    if not isinstance(payload, list):
        raise FetchFailure(f"Unexpected payload shape for '{resource}'", resource=resource)
    return payload


class HttpRecordSource:
    """
    Fetch records over HTTP with httpx.

    Parameters
    ----------
    base_url : str | None
        API root; defaults to settings.api_url.
    timeout : float | None
        Request timeout in seconds; defaults to settings.http_timeout_seconds.
    transport : httpx.AsyncBaseTransport | None
        Optional transport override (e.g. httpx.MockTransport in tests).
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        settings = get_settings()
        self.base_url = (base_url or settings.api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.http_timeout_seconds
        self._transport = transport

    async def fetch(self, resource: str, credential: Optional[str]) -> List[Record]:
        try:
            kind = ReportKind(resource)
        except ValueError:
            raise FetchFailure(f"Unknown resource '{resource}'", resource=resource) from None
        if not credential:
            raise MissingCredential(
                "Authentication token not found. Please log in again.", resource=resource
            )

        url = f"{self.base_url}/{kind.resource}"
        log.info("Fetching records", extra={"resource": kind.resource, "url": url})
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url, headers={"Authorization": f"Bearer {credential}"})
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            if status in (401, 403):
                raise MissingCredential(
                    f"Credential rejected for '{kind.resource}' (HTTP {status})",
                    resource=kind.resource,
                ) from exc
            raise FetchFailure(
                f"HTTP {status} fetching '{kind.resource}'",
                resource=kind.resource,
                status_code=status,
            ) from exc
        except httpx.HTTPError as exc:
            raise FetchFailure(
                f"Transport error fetching '{kind.resource}': {exc}", resource=kind.resource
            ) from exc
        except ValueError as exc:
            raise FetchFailure(f"Invalid JSON from '{kind.resource}'", resource=kind.resource) from exc

        items = _extract_items(kind.resource, payload)
        try:
            records = records_from_payload(items, _MODELS[kind])
        except ValidationError as exc:
            raise FetchFailure(
                f"Invalid records from '{kind.resource}': {exc.error_count()} error(s)",
                resource=kind.resource,
            ) from exc

        log.info("Fetched records", extra={"resource": kind.resource, "records": len(records)})
        return records


__all__ = ["HttpRecordSource", "RecordSource"]
