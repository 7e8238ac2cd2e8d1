"""
REST Mentee Gateway.

HTTP client for the mentee tracking backend (JSON over HTTPS).

Endpoints:
    GET  /mentees?cohort_batch={b}                  -> Mentee[]
    PUT  /mentees/{id}  {field: value}              -> Mentee
    GET  /checkin-notes?menteeId={id}               -> CheckInNote[]
    GET  /checkin-notes?cohortBatch={b}             -> CheckInNote[]
    POST /checkin-notes                             -> CheckInNote
    PUT  /checkin-notes/{id}                        -> CheckInNote
    GET  {prefix}/weekly-attendance-report?batch={b} -> {reports: [...]}
    GET  /mentees/count/batch6                      -> {count}
    GET  /mentees/count/checkins-due/{b}            -> {count}

Design Notes:
    - Explicitly constructed; base URL is configuration, not global state
    - One requests.Session per gateway
    - Every failure is translated into the GatewayError taxonomy
    - Implements MenteeGatewayProtocol
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from mentee_tracker.config.models import ApiConfig
from mentee_tracker.domain.entities import (
    CheckInNote,
    Mentee,
    MenteeField,
    WeeklyAttendanceReport,
)
from mentee_tracker.resilience.error_handler import (
    GatewayConnectionError,
    GatewayHTTPError,
    GatewayResponseError,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class RestMenteeGateway:
    """
    REST-backed data gateway.

    Usage:
        gateway = RestMenteeGateway(base_url="https://tracker.example.org")
        mentees = gateway.list_mentees("6")
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 30.0,
        session: Optional[requests.Session] = None,
        reports_prefix: str = "/api",
        update_method: str = "PUT",
        batch_count_path: str = "/mentees/count/batch6",
    ) -> None:
        """
        Initialize REST gateway.

        Args:
            base_url: Backend root, e.g. http://localhost:3000
            timeout_seconds: Per-request timeout
            session: Optional preconfigured session (tests, auth headers)
            reports_prefix: Path prefix of the weekly report endpoint
            update_method: HTTP method for mentee patches (PUT or PATCH)
            batch_count_path: Path of the batch mentee count endpoint
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.reports_prefix = reports_prefix.rstrip("/")
        self.update_method = update_method.upper()
        self.batch_count_path = batch_count_path
        self._session = session or requests.Session()

    @classmethod
    def from_config(
        cls,
        config: ApiConfig,
        session: Optional[requests.Session] = None,
    ) -> "RestMenteeGateway":
        """Build a gateway from the api section of the configuration."""
        return cls(
            base_url=config.base_url,
            timeout_seconds=config.timeout_seconds,
            session=session,
            reports_prefix=config.reports_prefix,
            update_method=config.update_method,
            batch_count_path=config.batch_count_path,
        )

    # =========================================================================
    # Mentees
    # =========================================================================

    def list_mentees(self, cohort_batch: Optional[str] = None) -> List[Mentee]:
        params = {"cohort_batch": cohort_batch} if cohort_batch else None
        payload = self._request("GET", "/mentees", "list_mentees", params=params)
        return self._parse_list(Mentee, payload, "list_mentees")

    def update_mentee(
        self,
        mentee_id: str,
        field: MenteeField,
        value: Optional[str],
    ) -> Mentee:
        payload = self._request(
            self.update_method,
            f"/mentees/{mentee_id}",
            "update_mentee",
            json={field.value: value},
        )
        return self._parse(Mentee, payload, "update_mentee")

    # =========================================================================
    # Check-in notes
    # =========================================================================

    def list_mentee_notes(self, mentee_id: str) -> List[CheckInNote]:
        payload = self._request(
            "GET", "/checkin-notes", "list_mentee_notes",
            params={"menteeId": mentee_id},
        )
        return self._parse_list(CheckInNote, payload, "list_mentee_notes")

    def list_cohort_notes(self, cohort_batch: str) -> List[CheckInNote]:
        payload = self._request(
            "GET", "/checkin-notes", "list_cohort_notes",
            params={"cohortBatch": cohort_batch},
        )
        return self._parse_list(CheckInNote, payload, "list_cohort_notes")

    def create_note(
        self,
        mentee_id: str,
        timestamp: datetime,
        note_content: str,
        executive_name: str,
    ) -> CheckInNote:
        body = {
            "menteeId": mentee_id,
            "timestamp": timestamp.isoformat(),
            "noteContent": note_content,
            "executiveName": executive_name,
        }
        payload = self._request("POST", "/checkin-notes", "create_note", json=body)
        return self._parse(CheckInNote, payload, "create_note")

    def update_note(self, note: CheckInNote) -> CheckInNote:
        payload = self._request(
            "PUT", f"/checkin-notes/{note.id}", "update_note",
            json=note.to_payload(),
        )
        return self._parse(CheckInNote, payload, "update_note")

    # =========================================================================
    # Reports and counts
    # =========================================================================

    def list_weekly_reports(
        self, cohort_batch: str
    ) -> List[WeeklyAttendanceReport]:
        payload = self._request(
            "GET",
            f"{self.reports_prefix}/weekly-attendance-report",
            "list_weekly_reports",
            params={"batch": cohort_batch},
        )
        if not isinstance(payload, dict) or "reports" not in payload:
            raise GatewayResponseError(
                "Expected an object with a 'reports' list",
                operation="list_weekly_reports",
            )
        return self._parse_list(
            WeeklyAttendanceReport, payload["reports"], "list_weekly_reports"
        )

    def count_batch_mentees(self) -> int:
        payload = self._request("GET", self.batch_count_path, "count_batch_mentees")
        return self._parse_count(payload, "count_batch_mentees")

    def count_checkins_due(self, cohort_batch: str) -> int:
        payload = self._request(
            "GET",
            f"/mentees/count/checkins-due/{cohort_batch}",
            "count_checkins_due",
        )
        return self._parse_count(payload, "count_checkins_due")

    def close(self) -> None:
        """Release pooled connections."""
        self._session.close()

    # =========================================================================
    # Internals
    # =========================================================================

    def _request(
        self,
        method: str,
        path: str,
        operation: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Issue one request and decode its JSON body."""
        url = f"{self.base_url}{path}"
        logger.debug(f"{operation}: {method} {url} params={params}")

        try:
            response = self._session.request(
                method,
                url,
                params=params,
                json=json,
                timeout=self.timeout_seconds,
            )
        except requests.RequestException as e:
            raise GatewayConnectionError(
                f"{method} {url} failed: {e}", operation=operation
            ) from e

        if not response.ok:
            raise GatewayHTTPError(
                f"{method} {url} returned HTTP {response.status_code}",
                status_code=response.status_code,
                operation=operation,
            )

        try:
            return response.json()
        except ValueError as e:
            raise GatewayResponseError(
                f"{method} {url} returned a non-JSON body", operation=operation
            ) from e

    def _parse(self, model: Type[ModelT], payload: Any, operation: str) -> ModelT:
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise GatewayResponseError(
                f"Unexpected {model.__name__} payload: {e.error_count()} errors",
                operation=operation,
            ) from e

    def _parse_list(
        self, model: Type[ModelT], payload: Any, operation: str
    ) -> List[ModelT]:
        if not isinstance(payload, list):
            raise GatewayResponseError(
                f"Expected a list of {model.__name__}", operation=operation
            )
        return [self._parse(model, item, operation) for item in payload]

    def _parse_count(self, payload: Any, operation: str) -> int:
        if not isinstance(payload, dict) or not isinstance(payload.get("count"), int):
            raise GatewayResponseError(
                "Expected an object with an integer 'count'", operation=operation
            )
        return payload["count"]
