"""Data models for Smart FAQ Admin Workbench."""

from .entry import Entry, DraftEntry
from .probe import ProbeSource, ProbeResult
from .analytics import FeedbackStats, PopularQuery, AnalyticsSnapshot
from .outcome import Outcome, FailureKind
from .flow_state import FlowState
from .application_state import ApplicationState

__all__ = [
    "Entry",
    "DraftEntry",
    "ProbeSource",
    "ProbeResult",
    "FeedbackStats",
    "PopularQuery",
    "AnalyticsSnapshot",
    "Outcome",
    "FailureKind",
    "FlowState",
    "ApplicationState"
]
