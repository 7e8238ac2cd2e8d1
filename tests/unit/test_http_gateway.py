"""
Unit Tests for RestMenteeGateway.

Test Aspects Covered:
    ✅ Business Logic: URLs, methods, params and bodies per endpoint
    ✅ Error Handling: Connection, HTTP status, malformed payloads
    ✅ Configuration: Base URL, reports prefix, update method
"""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import Mock

import pytest
import requests

from mentee_tracker.adapters.http_gateway import RestMenteeGateway
from mentee_tracker.config.models import ApiConfig
from mentee_tracker.domain.entities import CheckInNote, MenteeField, MenteeStatus
from mentee_tracker.resilience.error_handler import (
    GatewayConnectionError,
    GatewayHTTPError,
    GatewayResponseError,
)


def _response(payload=None, status_code: int = 200) -> Mock:
    response = Mock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.json.return_value = payload
    return response


@pytest.fixture
def session() -> Mock:
    return Mock(spec=requests.Session)


@pytest.fixture
def gateway(session) -> RestMenteeGateway:
    return RestMenteeGateway("http://tracker.test/", timeout_seconds=5, session=session)


class TestRequests:
    """Test cases for request construction."""

    def test_list_mentees(self, gateway, session) -> None:
        """
        SCENARIO: List mentees of batch 6
        EXPECTED: GET /mentees?cohort_batch=6, parsed mentees
        """
        # Arrange
        session.request.return_value = _response(
            [{"id": "m1", "name": "Asha", "status": "Call Later", "priority": "P1"}]
        )

        # Act
        mentees = gateway.list_mentees("6")

        # Assert
        session.request.assert_called_once_with(
            "GET",
            "http://tracker.test/mentees",
            params={"cohort_batch": "6"},
            json=None,
            timeout=5,
        )
        assert mentees[0].status is MenteeStatus.CALL_LATER

    def test_update_mentee(self, gateway, session) -> None:
        """
        SCENARIO: Clear the phone of a mentee
        EXPECTED: PUT /mentees/{id} with {"phone": null}
        """
        session.request.return_value = _response({"id": "m1", "name": "Asha"})

        gateway.update_mentee("m1", MenteeField.PHONE, None)

        args, kwargs = session.request.call_args
        assert args == ("PUT", "http://tracker.test/mentees/m1")
        assert kwargs["json"] == {"phone": None}

    def test_update_method_is_configurable(self, session) -> None:
        """
        SCENARIO: Gateway built from config with update_method PATCH
        EXPECTED: PATCH used for mentee updates
        """
        gateway = RestMenteeGateway.from_config(
            ApiConfig(base_url="http://tracker.test", update_method="PATCH"),
            session=session,
        )
        session.request.return_value = _response({"id": "m1", "name": "Asha"})

        gateway.update_mentee("m1", MenteeField.STATUS, "Completed")

        assert session.request.call_args[0][0] == "PATCH"

    def test_create_note_body(self, gateway, session) -> None:
        """
        SCENARIO: Create a note
        EXPECTED: POST /checkin-notes with camelCase body
        """
        # Arrange
        stamp = datetime(2025, 11, 12, 9, 0, tzinfo=timezone.utc)
        session.request.return_value = _response({
            "id": "n9", "menteeId": "m1", "timestamp": stamp.isoformat(),
            "noteContent": "Called", "executiveName": "Ravi",
        })

        # Act
        note = gateway.create_note("m1", stamp, "Called", "Ravi")

        # Assert
        kwargs = session.request.call_args[1]
        assert kwargs["json"] == {
            "menteeId": "m1",
            "timestamp": "2025-11-12T09:00:00+00:00",
            "noteContent": "Called",
            "executiveName": "Ravi",
        }
        assert note.id == "n9"

    def test_update_note_sends_full_body(self, gateway, session) -> None:
        """
        SCENARIO: Update a note
        EXPECTED: PUT /checkin-notes/{id} with the whole note
        """
        note = CheckInNote(
            id="n1", mentee_id="m1", note_content="New text", executive_name="Ravi",
            timestamp=datetime(2025, 11, 12, tzinfo=timezone.utc),
        )
        session.request.return_value = _response(note.to_payload())

        gateway.update_note(note)

        args, kwargs = session.request.call_args
        assert args == ("PUT", "http://tracker.test/checkin-notes/n1")
        assert kwargs["json"]["noteContent"] == "New text"

    def test_weekly_reports_use_prefix(self, gateway, session) -> None:
        """
        SCENARIO: List weekly reports
        EXPECTED: GET /api/weekly-attendance-report?batch=6, reports unwrapped
        """
        session.request.return_value = _response({"reports": [
            {"weekNumber": 45, "totalMentees": 8, "totalPresent": 7, "totalAbsent": 1},
        ]})

        reports = gateway.list_weekly_reports("6")

        args, kwargs = session.request.call_args
        assert args[1] == "http://tracker.test/api/weekly-attendance-report"
        assert kwargs["params"] == {"batch": "6"}
        assert reports[0].total_present == 7

    def test_counts(self, gateway, session) -> None:
        """
        SCENARIO: Batch count and check-ins due
        EXPECTED: Integer counts from {"count": n}
        """
        session.request.side_effect = [_response({"count": 42}), _response({"count": 5})]

        assert gateway.count_batch_mentees() == 42
        assert gateway.count_checkins_due("6") == 5
        urls = [c[0][1] for c in session.request.call_args_list]
        assert urls == [
            "http://tracker.test/mentees/count/batch6",
            "http://tracker.test/mentees/count/checkins-due/6",
        ]


class TestErrorTranslation:
    """Test cases for failure translation."""

    def test_connection_error(self, gateway, session) -> None:
        """
        SCENARIO: Network failure
        EXPECTED: GatewayConnectionError carrying the operation
        """
        session.request.side_effect = requests.ConnectionError("refused")

        with pytest.raises(GatewayConnectionError) as exc_info:
            gateway.list_mentees("6")
        assert exc_info.value.operation == "list_mentees"

    def test_http_error(self, gateway, session) -> None:
        """
        SCENARIO: Server answers 500
        EXPECTED: GatewayHTTPError with status code
        """
        session.request.return_value = _response({"error": "boom"}, status_code=500)

        with pytest.raises(GatewayHTTPError) as exc_info:
            gateway.list_mentee_notes("m1")
        assert exc_info.value.status_code == 500

    def test_non_json_body(self, gateway, session) -> None:
        """
        SCENARIO: Body is not JSON
        EXPECTED: GatewayResponseError
        """
        response = _response()
        response.json.side_effect = ValueError("no json")
        session.request.return_value = response

        with pytest.raises(GatewayResponseError):
            gateway.list_mentees()

    def test_unknown_status(self, gateway, session) -> None:
        """
        SCENARIO: Mentee with a status outside the enumeration
        EXPECTED: GatewayResponseError
        """
        session.request.return_value = _response([{"id": "m1", "name": "A", "status": "Lost"}])

        with pytest.raises(GatewayResponseError):
            gateway.list_mentees("6")

    def test_reports_without_envelope(self, gateway, session) -> None:
        """
        SCENARIO: Weekly reports returned as a bare list
        EXPECTED: GatewayResponseError
        """
        session.request.return_value = _response([])

        with pytest.raises(GatewayResponseError):
            gateway.list_weekly_reports("6")

    def test_count_must_be_integer(self, gateway, session) -> None:
        """
        SCENARIO: Count payload without an integer count
        EXPECTED: GatewayResponseError
        """
        session.request.return_value = _response({"count": "many"})

        with pytest.raises(GatewayResponseError):
            gateway.count_batch_mentees()
