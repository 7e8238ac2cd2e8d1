"""
Unit Tests for MenteeNotebook and CohortNotesBoard.

Test Aspects Covered:
    ✅ Business Logic: Most-recent-first ordering, add, edit
    ✅ Error Handling: Failed add/edit leaves the list unchanged
    ✅ Validation: Blank content and missing author send nothing
    ✅ Edge Cases: Edit of an unknown id is a no-op
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from mentee_tracker.adapters.memory_gateway import InMemoryMenteeGateway
from mentee_tracker.domain.entities import CheckInNote, NoteMentee
from mentee_tracker.notes.notebook import CohortNotesBoard, MenteeNotebook, sort_notes
from mentee_tracker.resilience.error_handler import GatewayError
from mentee_tracker.validation.input_validator import EmptyNoteError, MissingAuthorError


@pytest.fixture
def gateway(notes) -> InMemoryMenteeGateway:
    return InMemoryMenteeGateway(notes=notes)


@pytest.fixture
def notebook(gateway) -> MenteeNotebook:
    book = MenteeNotebook(gateway, "a")
    book.load()
    return book


class TestOrdering:
    """Test cases for note ordering."""

    def test_sorted_by_full_timestamp(self, notes) -> None:
        """
        SCENARIO: Two notes on the same day, different times
        EXPECTED: Evening note before morning note
        """
        assert [n.id for n in sort_notes(notes)] == ["n2", "n3", "n1"]

    def test_mixed_naive_and_aware_timestamps(self) -> None:
        """
        SCENARIO: Backend returns one timestamp with an offset, one without
        EXPECTED: Naive one read as UTC; sorting does not fail
        """
        # Arrange
        mixed = [
            CheckInNote.model_validate(
                {"id": "z", "timestamp": "2025-11-12T10:00:00Z", "noteContent": "a"}
            ),
            CheckInNote.model_validate(
                {"id": "naive", "timestamp": "2025-11-12T11:00:00", "noteContent": "b"}
            ),
        ]

        # Act
        ordered = sort_notes(mixed)

        # Assert
        assert [n.id for n in ordered] == ["naive", "z"]
        assert ordered[0].timestamp.tzinfo is not None

    def test_load_orders_descending(self, notebook) -> None:
        """
        SCENARIO: Load notes from the gateway
        EXPECTED: Strictly descending timestamps
        """
        stamps = [n.timestamp for n in notebook.notes]
        assert all(a > b for a, b in zip(stamps, stamps[1:]))


class TestAdd:
    """Test cases for MenteeNotebook.add()."""

    def test_prepends_server_echo(self, notebook) -> None:
        """
        SCENARIO: Add a note with surrounding whitespace
        EXPECTED: Trimmed note prepended, count +1
        """
        # Arrange
        now = datetime(2025, 11, 13, 9, 0, tzinfo=timezone.utc)

        # Act
        created = notebook.add("  Attended session  ", "Meera", now=now)

        # Assert
        assert len(notebook) == 4
        assert notebook.notes[0] == created
        assert created.note_content == "Attended session"
        assert created.executive_name == "Meera"
        assert created.timestamp == now

    def test_blank_content_sends_nothing(self, notebook, gateway) -> None:
        """
        SCENARIO: Whitespace-only content
        EXPECTED: EmptyNoteError, no request
        """
        gateway.calls.clear()
        with pytest.raises(EmptyNoteError):
            notebook.add("   ", "Meera")
        assert gateway.calls == []
        assert len(notebook) == 3

    def test_missing_author_sends_nothing(self, notebook, gateway) -> None:
        """
        SCENARIO: No executive name
        EXPECTED: MissingAuthorError, no request
        """
        gateway.calls.clear()
        with pytest.raises(MissingAuthorError):
            notebook.add("Called", None)
        assert gateway.calls == []

    def test_failure_leaves_list_unchanged(self, notebook, gateway) -> None:
        """
        SCENARIO: Create request fails
        EXPECTED: GatewayError raised, note count unchanged
        """
        # Arrange
        before = notebook.notes
        gateway.fail_on.add("create_note")

        # Act & Assert
        with pytest.raises(GatewayError):
            notebook.add("Called", "Meera")
        assert notebook.notes == before


class TestEdit:
    """Test cases for MenteeNotebook.edit()."""

    def test_replaces_in_place(self, notebook) -> None:
        """
        SCENARIO: Edit the middle note
        EXPECTED: Content replaced, position kept
        """
        # Act
        updated = notebook.edit("n3", " Rescheduled ")

        # Assert
        assert updated is not None
        assert updated.note_content == "Rescheduled"
        assert [n.id for n in notebook.notes] == ["n2", "n3", "n1"]
        assert notebook.notes[1].note_content == "Rescheduled"

    def test_unknown_id_is_noop(self, notebook, gateway) -> None:
        """
        SCENARIO: Edit an id that is not loaded
        EXPECTED: None returned, no request, list unchanged
        """
        # Arrange
        before = notebook.notes
        gateway.calls.clear()

        # Act
        result = notebook.edit("missing", "text")

        # Assert
        assert result is None
        assert gateway.calls == []
        assert notebook.notes == before

    def test_failure_leaves_list_unchanged(self, notebook, gateway) -> None:
        """
        SCENARIO: Update request fails
        EXPECTED: GatewayError raised, old content kept
        """
        gateway.fail_on.add("update_note")
        with pytest.raises(GatewayError):
            notebook.edit("n1", "changed")
        assert notebook.notes[-1].note_content == "First call"


class TestCohortNotesBoard:
    """Test cases for CohortNotesBoard."""

    @pytest.fixture
    def board(self) -> CohortNotesBoard:
        stamp = datetime(2025, 11, 12, tzinfo=timezone.utc)
        return CohortNotesBoard([
            CheckInNote(id="1", timestamp=stamp, note_content="a", week_number=46,
                        mentee=NoteMentee(id="m1", name="A", poc="Ravi")),
            CheckInNote(id="2", timestamp=stamp, note_content="b", week_number=45,
                        mentee=NoteMentee(id="m2", name="B", poc="Meera")),
            CheckInNote(id="3", timestamp=stamp, note_content="c", week_number=46),
        ])

    def test_filter_by_week_and_poc(self, board) -> None:
        """
        SCENARIO: Week 46 and POC Ravi
        EXPECTED: Only note 1; note without mentee excluded
        """
        assert [n.id for n in board.filter(week_number=46, poc="Ravi")] == ["1"]
        assert [n.id for n in board.filter(week_number=46)] == ["1", "3"]
        assert len(board.filter()) == 3

    def test_selector_options(self, board) -> None:
        """
        SCENARIO: Build week and POC selectors
        EXPECTED: Ascending weeks, POCs in first-seen order
        """
        assert board.week_numbers() == [45, 46]
        assert board.pocs() == ["Ravi", "Meera"]
