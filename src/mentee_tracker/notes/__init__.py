"""
Notes Package - Check-in Note Ordering and Editing.

Components:
    - MenteeNotebook: per-mentee notes, most recent first
    - CohortNotesBoard: cohort-wide listing with week/POC filters
    - sort_notes(): descending timestamp order
"""

from mentee_tracker.notes.notebook import CohortNotesBoard, MenteeNotebook, sort_notes

__all__ = ["CohortNotesBoard", "MenteeNotebook", "sort_notes"]
