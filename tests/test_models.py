"""
Unit tests for data models.
"""

import pytest

from models import (
    AnalyticsSnapshot,
    DraftEntry,
    Entry,
    FailureKind,
    FlowState,
    Outcome,
    ProbeResult
)


class TestEntry:
    
    def test_from_dict_optional_category(self):
        entry = Entry.from_dict({"id": 17, "question": "Q", "answer": "A", "category": ""})
        
        assert entry.id == "17"
        assert entry.category is None
    
    def test_from_dict_missing_id(self):
        with pytest.raises(KeyError):
            Entry.from_dict({"question": "Q", "answer": "A"})
    
    def test_from_dict_null_text_fields(self):
        entry = Entry.from_dict({"id": "1", "question": None, "category": None})
        
        assert entry.question == ""
        assert entry.answer == ""
        assert entry.category is None
    
    def test_from_dict_not_a_mapping(self):
        with pytest.raises(TypeError):
            Entry.from_dict(["1", "Q", "A"])


class TestDraftEntry:
    
    def test_starts_empty(self):
        draft = DraftEntry()
        assert (draft.question, draft.answer, draft.category) == ("", "", "")
        assert not draft.is_submittable()
    
    def test_category_is_optional(self):
        assert DraftEntry(question="Q", answer="A").is_submittable()
    
    def test_reset(self):
        draft = DraftEntry(question="Q", answer="A", category="C")
        draft.reset()
        assert draft == DraftEntry()
    
    def test_to_entry(self):
        entry = DraftEntry(question="Q", answer="A").to_entry("x1")
        assert entry == Entry(id="x1", question="Q", answer="A", category=None)


class TestProbeResult:
    
    def test_sources_default_to_empty(self):
        result = ProbeResult.from_dict({"answer": "a", "confidence": 0.3, "responseTime": 5})
        assert result.sources == []
    
    def test_source_with_null_text(self):
        result = ProbeResult.from_dict({
            "answer": "a",
            "sources": [{"question": None, "similarity": 0.4}],
            "confidence": 0.3,
            "responseTime": 5
        })
        
        assert result.sources[0].question == ""
        assert result.sources[0].answer == ""
    
    def test_sources_must_be_list(self):
        with pytest.raises(TypeError):
            ProbeResult.from_dict({"answer": "a", "sources": "x", "confidence": 0.3, "responseTime": 5})
    
    def test_bad_number(self):
        with pytest.raises(ValueError):
            ProbeResult.from_dict({"answer": "a", "confidence": "high", "responseTime": 5})


class TestAnalyticsSnapshot:
    
    def test_missing_sections(self):
        snapshot = AnalyticsSnapshot.from_dict({})
        
        assert snapshot.feedback_stats.avg_rating is None
        assert snapshot.feedback_stats.helpful_count is None
        assert snapshot.popular_queries == []
    
    def test_null_avg_rating(self):
        snapshot = AnalyticsSnapshot.from_dict({
            "feedbackStats": {"avg_rating": None, "helpful_count": 2, "total_feedback": 5}
        })
        
        assert snapshot.feedback_stats.avg_rating is None
        assert snapshot.feedback_stats.total_feedback == 5
    
    def test_popular_query_missing_fields(self):
        snapshot = AnalyticsSnapshot.from_dict({
            "popularQueries": [
                {"query": "refund", "count": 4, "avg_time": 12.5},
                {"count": 1, "avg_time": 3},
                {"query": None}
            ]
        })
        
        assert [q.query for q in snapshot.popular_queries] == ["refund", "", ""]
        assert snapshot.popular_queries[2].count == 0
        assert snapshot.popular_queries[2].avg_time is None
    
    def test_not_a_mapping(self):
        with pytest.raises(TypeError):
            AnalyticsSnapshot.from_dict([])


class TestOutcome:
    
    def test_success(self):
        outcome = Outcome.success([1])
        assert outcome.ok and outcome.data == [1] and outcome.kind is None
    
    def test_failure_description(self):
        assert "响应格式错误" in Outcome.failure(FailureKind.MALFORMED, "bad").describe()
        assert "网络请求失败" in Outcome.failure(FailureKind.TRANSPORT, "HTTP 500").describe()


class TestFlowState:
    
    def test_begin_finish(self):
        flow = FlowState()
        token = flow.begin()
        assert flow.busy
        assert flow.finish(token)
        assert not flow.busy
    
    def test_stale_finish_keeps_busy(self):
        flow = FlowState()
        first = flow.begin()
        second = flow.begin()
        
        assert not flow.finish(first)
        assert flow.busy
        assert flow.finish(second)
        assert not flow.busy
