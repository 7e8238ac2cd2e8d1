"""
Views Package - Dashboard Screen Controllers.

Each controller owns a ViewScope and routes gateway failures through
the ErrorHandler:
    - HomeView: batch total and check-ins due
    - MenteeDashboard: roster, filters, priority counts
    - MenteeDetailView: field patching and check-in notes
    - WeeklySummaryView: report selection, preview, download
    - AnalyticsView: attendance trend
    - QuickNotesView: cohort-wide notes by week and POC
"""

from mentee_tracker.views.analytics import AnalyticsView
from mentee_tracker.views.dashboard import MenteeDashboard
from mentee_tracker.views.home import HomeView
from mentee_tracker.views.mentee_detail import MenteeDetailView, patch_mentee_field
from mentee_tracker.views.quick_notes import QuickNotesView
from mentee_tracker.views.scope import ViewScope
from mentee_tracker.views.weekly_summary import ReportPreview, WeeklySummaryView

__all__ = [
    "AnalyticsView",
    "HomeView",
    "MenteeDashboard",
    "MenteeDetailView",
    "QuickNotesView",
    "ReportPreview",
    "ViewScope",
    "WeeklySummaryView",
    "patch_mentee_field",
]
