"""
End-to-end integration tests for the complete workflow.

Tests the UI handlers against the in-memory service:
Session start → Add FAQ → Delete FAQ → Probe → Analytics
"""

import warnings

import pandas as pd

from app import probe_control_updates
from models import DraftEntry
from services import Mode
from ui.event_handlers import (
    ADD_LABEL,
    ADD_BUSY_LABEL,
    REFRESH_BUSY_LABEL,
    SEARCH_BUSY_LABEL,
    SEARCH_LABEL,
    handle_add_entry,
    handle_analytics_refresh,
    handle_delete_entry,
    handle_mode_select,
    handle_probe,
    handle_session_start,
    lock_curation,
    lock_probe,
    update_draft_field
)


def test_session_start_loads_entries_and_analytics(app_state, service):
    service.entries = [{"id": "1", "question": "Q1", "answer": "A1"}]
    service.analytics = {
        "feedbackStats": {"avg_rating": 4.5, "helpful_count": 2, "total_feedback": 3},
        "popularQueries": [{"query": "refund", "count": 2, "avg_time": 99.5}]
    }
    
    state, status_html, entry_html, choices, label, stats_html, queries = handle_session_start(app_state)
    
    assert state.mode_controller.mode == Mode.CURATION
    assert "Q1" in entry_html
    assert choices == [("Q1", "1")]
    assert label == "📚 管理FAQ (1)"
    assert "4.5" in stats_html
    assert isinstance(queries, pd.DataFrame)
    assert queries.iloc[0, 2] == 100
    assert "已加载 1 条FAQ" in status_html


def test_session_start_failure_shows_banner(app_state, service):
    service.fail_paths["GET /api/analytics"] = 500
    
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        state, status_html, *_ = handle_session_start(app_state)
    
    assert "数据分析" in status_html
    assert state.analytics.snapshot is None
    assert any("加载失败" in str(w.message) for w in caught)


def test_add_and_delete_entry(app_state, service):
    handle_session_start(app_state)
    
    assert lock_curation() == (False, ADD_BUSY_LABEL)
    
    update_draft_field("question", "How long do refunds take?", app_state)
    update_draft_field("answer", "Five business days.", app_state)
    update_draft_field("category", "billing", app_state)
    
    (state, status_html, question, answer, category,
     entry_html, choices, label, interactive, add_label) = handle_add_entry(app_state)
    
    assert (question, answer, category) == ("", "", "")
    assert "How long do refunds take?" in entry_html
    assert label == "📚 管理FAQ (1)"
    assert interactive is True and add_label == ADD_LABEL
    assert "FAQ已添加" in status_html
    
    entry_id = choices[0][1]
    state, status_html, entry_html, choices, label, interactive, add_label = handle_delete_entry(entry_id, state)
    
    assert choices == []
    assert label == "📚 管理FAQ (0)"
    assert "暂无FAQ" in entry_html
    assert state.entry_store.flow.busy is False


def test_incomplete_draft_keeps_inputs(app_state, service):
    update_draft_field("question", "Only a question", app_state)
    
    (state, status_html, question, answer, category,
     entry_html, choices, label, interactive, add_label) = handle_add_entry(app_state)
    
    assert service.requests == []
    assert question == "Only a question"
    assert interactive is True


def test_failed_add_reports_and_clears_draft(app_state, service):
    service.fail_paths["POST /api/faqs"] = 500
    update_draft_field("question", "Q", app_state)
    update_draft_field("answer", "A", app_state)
    
    with warnings.catch_warnings(record=True):
        warnings.simplefilter("always")
        state, status_html, question, answer, *_ = handle_add_entry(app_state)
    
    assert "添加FAQ失败" in status_html
    assert (question, answer) == ("", "")
    assert state.draft == DraftEntry()


def test_delete_without_selection_is_ignored(app_state, service):
    handle_delete_entry(None, app_state)
    
    assert service.requests == []


def test_probe_flow(app_state, service):
    service.answer = {
        "answer": "Refunds take five days.",
        "sources": [{"question": "Q", "answer": "A", "similarity": 0.92}],
        "confidence": 0.87,
        "responseTime": 120
    }
    handle_mode_select("probe", app_state)
    
    assert lock_probe()[0] is False
    state, status_html, result_html, interactive, label = handle_probe("refund policy", app_state)
    
    assert "置信度: 87.0% | 响应时间: 120ms" in result_html
    assert "相似度: 92.0%" in result_html
    assert interactive is True and label == SEARCH_LABEL
    # probe leaves the curation flow untouched
    assert state.entry_store.flow.busy is False


def test_empty_probe_keeps_previous_result(app_state, service):
    service.answer = {"answer": "first", "sources": [], "confidence": 0.5, "responseTime": 1}
    handle_probe("q", app_state)
    request_count = len(service.requests)
    
    state, status_html, result_html, *_ = handle_probe("", app_state)
    
    assert len(service.requests) == request_count
    assert "first" in result_html


def test_analytics_refresh_failure_keeps_snapshot(app_state, service):
    service.analytics = {"feedbackStats": {"helpful_count": 4}, "popularQueries": []}
    handle_analytics_refresh(app_state)
    
    service.fail_paths["GET /api/analytics"] = 503
    with warnings.catch_warnings(record=True):
        warnings.simplefilter("always")
        state, status_html, stats_html, queries, interactive, label = handle_analytics_refresh(app_state)
    
    assert '<div class="metric-value">4</div>' in stats_html
    assert "刷新数据分析失败" in status_html
    assert interactive is True


def test_delete_status_names_the_entry(app_state, service):
    service.entries = [{"id": "1", "question": "How do refunds work?", "answer": "A"}]
    handle_session_start(app_state)
    
    state, status_html, *_ = handle_delete_entry("1", app_state)
    
    assert "FAQ已删除: How do refunds work?" in status_html


def test_delete_reports_failed_reload(app_state, service):
    service.entries = [{"id": "1", "question": "Q1", "answer": "A1"}]
    handle_session_start(app_state)
    service.fail_paths["GET /api/faqs"] = 500
    
    with warnings.catch_warnings(record=True):
        warnings.simplefilter("always")
        state, status_html, entry_html, choices, *_ = handle_delete_entry("1", app_state)
    
    assert "刷新FAQ列表失败" in status_html
    assert len(service.requests_to("DELETE", "/api/faqs/1")) == 1
    # the list keeps what was last loaded
    assert choices == [("Q1", "1")]


def test_curation_controls_follow_busy_flag(app_state, service):
    # a newer curation request starts while the create is in flight
    service.on_request = lambda request: app_state.entry_store.flow.begin()
    update_draft_field("question", "Q", app_state)
    update_draft_field("answer", "A", app_state)
    
    (state, status_html, question, answer, category,
     entry_html, choices, label, interactive, add_label) = handle_add_entry(app_state)
    
    assert state.entry_store.flow.busy is True
    assert interactive is False and add_label == ADD_BUSY_LABEL
    
    service.on_request = None
    state, status_html, entry_html, choices, label, interactive, add_label = handle_delete_entry(None, state)
    
    assert interactive is (not state.entry_store.flow.busy)


def test_probe_controls_follow_busy_flag(app_state, service):
    service.answer = {"answer": "a", "sources": [], "confidence": 0.5, "responseTime": 1}
    service.on_request = lambda request: app_state.probe_session.flow.begin()
    
    state, status_html, result_html, interactive, label = handle_probe("refund", app_state)
    
    assert state.probe_session.flow.busy is True
    assert interactive is False and label == SEARCH_BUSY_LABEL
    
    search_update, query_update = probe_control_updates(interactive, label)
    assert search_update["interactive"] is False
    assert query_update["interactive"] is False


def test_analytics_controls_follow_busy_flag(app_state, service):
    service.on_request = lambda request: app_state.analytics.flow.begin()
    
    state, status_html, stats_html, queries, interactive, label = handle_analytics_refresh(app_state)
    
    assert state.analytics.flow.busy is True
    assert interactive is False and label == REFRESH_BUSY_LABEL


def test_probe_lock_disables_query_box(app_state, service):
    search_update, query_update = probe_control_updates(*lock_probe())
    
    assert search_update["interactive"] is False
    assert query_update["interactive"] is False
    
    state, status_html, result_html, interactive, label = handle_probe("refund policy", app_state)
    search_update, query_update = probe_control_updates(interactive, label)
    
    assert query_update["interactive"] is True
    assert search_update["value"] == SEARCH_LABEL
    assert "搜索完成: refund policy" in status_html
