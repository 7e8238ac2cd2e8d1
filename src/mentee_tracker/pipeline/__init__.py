"""
Pipeline Package - Roster Loading and Filtering.

Components:
    - MenteeCollectionLoader: fetch + stable priority ordering
    - MenteeFilterPipeline: conjunction of predicates with audit trail
    - filter_mentees(): pure convenience wrapper

Control flow: loader -> (filter pipeline, aggregation) -> presentation.
"""

from mentee_tracker.pipeline.filter_pipeline import (
    MenteeFilterPipeline,
    filter_mentees,
)
from mentee_tracker.pipeline.loader import MenteeCollectionLoader, sort_by_priority

__all__ = [
    "MenteeCollectionLoader",
    "MenteeFilterPipeline",
    "filter_mentees",
    "sort_by_priority",
]
