"""
Analytics snapshot models for Smart FAQ Admin Workbench.

A snapshot is a read-only point-in-time usage report; missing numeric
fields stay None so the view can show an explicit "unavailable" marker.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _optional_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    return float(value)


def _optional_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    return int(value)


@dataclass(frozen=True)
class FeedbackStats:
    """
    Aggregated user feedback.
    
    Attributes:
        avg_rating: Average rating, None when no rating exists
        helpful_count: Number of "helpful" votes
        total_feedback: Total feedback submissions
    """
    
    avg_rating: Optional[float] = None
    helpful_count: Optional[int] = None
    total_feedback: Optional[int] = None
    
    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "FeedbackStats":
        if not data:
            return cls()
        if not isinstance(data, dict):
            raise TypeError("feedbackStats must be an object")
        return cls(
            avg_rating=_optional_float(data.get("avg_rating")),
            helpful_count=_optional_int(data.get("helpful_count")),
            total_feedback=_optional_int(data.get("total_feedback"))
        )


@dataclass(frozen=True)
class PopularQuery:
    """One row of the popular-queries table (trailing 7 days)."""
    
    query: str
    count: int
    avg_time: Optional[float] = None
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PopularQuery":
        if not isinstance(data, dict):
            raise TypeError("popular query row must be an object")
        return cls(
            query=str(data.get("query") or ""),
            count=int(data.get("count") or 0),
            avg_time=_optional_float(data.get("avg_time"))
        )


@dataclass(frozen=True)
class AnalyticsSnapshot:
    """
    Aggregate usage report.
    
    Attributes:
        feedback_stats: Feedback summary
        popular_queries: Query table in service-defined order
    """
    
    feedback_stats: FeedbackStats = field(default_factory=FeedbackStats)
    popular_queries: List[PopularQuery] = field(default_factory=list)
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalyticsSnapshot":
        """
        Build a snapshot from the decoded analytics response.
        
        Raises:
            TypeError: If data is not a mapping or popularQueries is not a list
        """
        if not isinstance(data, dict):
            raise TypeError(f"analytics response must be an object, got {type(data).__name__}")
        
        queries = data.get("popularQueries") or []
        if not isinstance(queries, list):
            raise TypeError("popularQueries must be a list")
        
        return cls(
            feedback_stats=FeedbackStats.from_dict(data.get("feedbackStats")),
            popular_queries=[PopularQuery.from_dict(item) for item in queries]
        )
