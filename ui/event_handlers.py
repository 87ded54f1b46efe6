"""
Event handlers for UI components.

Handles user interactions and state updates. Handlers return plain values
(strings, booleans, lists, DataFrames); app.py wraps them into gr.update
calls.
"""

import html
from typing import Any, List, Optional, Tuple

import gradio as gr
import pandas as pd

from models import ApplicationState, Outcome
from services import (
    AnalyticsService,
    EntryStore,
    FaqApiClient,
    Mode,
    ModeController,
    ProbeSession,
    RenderEngine
)
from utils.validation import validate_entry_id


ADD_LABEL = "➕ 添加FAQ"
ADD_BUSY_LABEL = "⏳ 添加中..."
DELETE_LABEL = "🗑️ 删除所选FAQ"
SEARCH_LABEL = "🔍 搜索"
SEARCH_BUSY_LABEL = "⏳ 搜索中..."
REFRESH_LABEL = "🔄 刷新数据"
REFRESH_BUSY_LABEL = "⏳ 加载中..."

BANNER_DURATION = 3.0

_render_engine = RenderEngine()


def create_app_state(client: Optional[FaqApiClient] = None) -> ApplicationState:
    """
    Build a fresh per-session state.
    
    Args:
        client: Service client for all stores (defaults to the process-wide one)
    
    Returns:
        ApplicationState in curation mode with empty stores
    """
    return ApplicationState(
        mode_controller=ModeController(),
        entry_store=EntryStore(client),
        probe_session=ProbeSession(client),
        analytics=AnalyticsService(client)
    )


def generate_status_html(status_text: str) -> str:
    """
    生成状态栏HTML。
    
    Args:
        status_text: 状态文本（为空时显示就绪）
    
    Returns:
        HTML格式的状态显示
    """
    line = html.escape(status_text) if status_text else "✅ 就绪"
    return f'<div class="load-status">{line}</div>'


def curation_tab_label(entry_count: int) -> str:
    """Mode-bar label for the curation panel, carrying the entry count."""
    return f"📚 管理FAQ ({entry_count})"


def entry_choices(state: ApplicationState) -> List[Tuple[str, str]]:
    """
    Delete-selector choices as (label, entry_id), in store order.
    """
    return [(_preview(entry.question), entry.id) for entry in state.entry_store.entries]


def _preview(text: str) -> str:
    return text[:40] + "..." if len(text) > 40 else text


def _report(state: ApplicationState, outcome: Optional[Outcome], success_text: str, failure_text: str):
    """Record outcome in the status line and raise a transient banner."""
    if outcome is None:
        return
    
    if outcome.ok:
        state.status_message = success_text
        gr.Info(success_text, duration=BANNER_DURATION)
    else:
        state.status_message = f"❌ {failure_text}: {outcome.describe()}"
        gr.Warning(state.status_message, duration=BANNER_DURATION)


def handle_mode_select(mode: str, state: ApplicationState) -> Tuple[ApplicationState, bool, bool, bool]:
    """
    Switch the visible panel.
    
    Args:
        mode: "curation", "probe" or "analytics"
        state: Current application state
    
    Returns:
        Tuple of (state, curation_visible, probe_visible, analytics_visible)
    """
    state.mode_controller.select(mode)
    visibility = state.mode_controller.visibility()
    return state, visibility[Mode.CURATION], visibility[Mode.PROBE], visibility[Mode.ANALYTICS]


def update_draft_field(field_name: str, value: str, state: ApplicationState) -> ApplicationState:
    """
    Apply one field edit to the draft entry.
    
    Args:
        field_name: "question", "answer" or "category"
        value: New field content
        state: Current application state
    
    Returns:
        Updated application state
    """
    if field_name not in ("question", "answer", "category"):
        raise ValueError(f"Unknown draft field: {field_name}")
    setattr(state.draft, field_name, value or "")
    return state


def render_curation(state: ApplicationState) -> Tuple[str, List[Tuple[str, str]], str]:
    """
    Returns:
        Tuple of (entry_list_html, delete_choices, curation_tab_label)
    """
    return (
        _render_engine.render_entry_list(state.entry_store.entries),
        entry_choices(state),
        curation_tab_label(state.get_entry_count())
    )


def render_analytics(state: ApplicationState) -> Tuple[str, pd.DataFrame]:
    """
    Returns:
        Tuple of (feedback_stats_html, popular_queries_frame)
    """
    snapshot = state.analytics.snapshot
    return (
        _render_engine.render_feedback_stats(snapshot),
        _render_engine.popular_queries_frame(snapshot)
    )


def handle_session_start(state: ApplicationState) -> Tuple[Any, ...]:
    """
    Load entries and analytics when a browser session opens.
    
    Returns:
        Tuple of (state, status_html, entry_list_html, delete_choices,
        curation_label, feedback_stats_html, popular_queries_frame)
    """
    entries_outcome = state.entry_store.refresh()
    analytics_outcome = state.analytics.refresh()
    
    failures = [
        f"{name}: {outcome.describe()}"
        for name, outcome in (("FAQ列表", entries_outcome), ("数据分析", analytics_outcome))
        if not outcome.ok
    ]
    if failures:
        state.status_message = "❌ 加载失败 - " + "; ".join(failures)
        gr.Warning(state.status_message, duration=BANNER_DURATION)
    else:
        state.status_message = f"✅ 已加载 {state.get_entry_count()} 条FAQ"
    
    entry_html, choices, label = render_curation(state)
    stats_html, queries = render_analytics(state)
    return state, generate_status_html(state.status_message), entry_html, choices, label, stats_html, queries


def lock_curation() -> Tuple[bool, str]:
    """
    First step of an add/delete click: disable the curation controls.
    
    Returns:
        Tuple of (controls_interactive, add_button_label)
    """
    return False, ADD_BUSY_LABEL


def curation_controls(state: ApplicationState) -> Tuple[bool, str]:
    """Curation control state derived from the curation busy flag."""
    if state.entry_store.flow.busy:
        return lock_curation()
    return True, ADD_LABEL


def handle_add_entry(state: ApplicationState) -> Tuple[Any, ...]:
    """
    Submit the draft entry and reload the list.
    
    An incomplete draft is ignored: no request, no message, inputs kept.
    
    Returns:
        Tuple of (state, status_html, question, answer, category,
        entry_list_html, delete_choices, curation_label,
        controls_interactive, add_button_label)
    """
    outcome = state.entry_store.submit(state.draft)
    
    if outcome is not None:
        _report(state, outcome, "✅ FAQ已添加", "添加FAQ失败")
        refresh = state.entry_store.last_refresh
        if outcome.ok and refresh is not None and not refresh.ok:
            _report(state, refresh, "", "刷新FAQ列表失败")
    
    draft = state.draft
    entry_html, choices, label = render_curation(state)
    interactive, add_label = curation_controls(state)
    return (
        state, generate_status_html(state.status_message),
        draft.question, draft.answer, draft.category,
        entry_html, choices, label,
        interactive, add_label
    )


def handle_delete_entry(entry_id: Optional[str], state: ApplicationState) -> Tuple[Any, ...]:
    """
    Delete the selected entry and reload the list.
    
    Returns:
        Tuple of (state, status_html, entry_list_html, delete_choices,
        curation_label, controls_interactive, add_button_label)
    """
    is_valid, _ = validate_entry_id(entry_id)
    if is_valid:
        entry = state.entry_store.find(entry_id)
        success_text = f"✅ FAQ已删除: {_preview(entry.question)}" if entry else "✅ FAQ已删除"
        
        outcome = state.entry_store.remove(entry_id)
        _report(state, outcome, success_text, "删除FAQ失败")
        refresh = state.entry_store.last_refresh
        if outcome.ok and refresh is not None and not refresh.ok:
            _report(state, refresh, "", "刷新FAQ列表失败")
    
    entry_html, choices, label = render_curation(state)
    interactive, add_label = curation_controls(state)
    return (
        state, generate_status_html(state.status_message),
        entry_html, choices, label,
        interactive, add_label
    )


def lock_probe() -> Tuple[bool, str]:
    """
    Returns:
        Tuple of (search_interactive, search_button_label)
    """
    return False, SEARCH_BUSY_LABEL


def handle_probe(query: str, state: ApplicationState) -> Tuple[Any, ...]:
    """
    Send a probe query and show the answer.
    
    Search button and query box stay disabled while the probe flow is busy.
    
    Returns:
        Tuple of (state, status_html, result_html, search_interactive,
        search_button_label)
    """
    session = state.probe_session
    outcome = session.ask(query or "")
    _report(state, outcome, f"✅ 搜索完成: {_preview(session.last_query)}", "搜索失败")
    
    result_html = _render_engine.render_probe_result(session.result)
    interactive, label = lock_probe() if session.flow.busy else (True, SEARCH_LABEL)
    return state, generate_status_html(state.status_message), result_html, interactive, label


def lock_analytics() -> Tuple[bool, str]:
    """
    Returns:
        Tuple of (refresh_interactive, refresh_button_label)
    """
    return False, REFRESH_BUSY_LABEL


def handle_analytics_refresh(state: ApplicationState) -> Tuple[Any, ...]:
    """
    Reload the analytics snapshot.
    
    Returns:
        Tuple of (state, status_html, feedback_stats_html,
        popular_queries_frame, refresh_interactive, refresh_button_label)
    """
    outcome = state.analytics.refresh()
    _report(state, outcome, "✅ 数据分析已刷新", "刷新数据分析失败")
    
    stats_html, queries = render_analytics(state)
    interactive, label = lock_analytics() if state.analytics.flow.busy else (True, REFRESH_LABEL)
    return state, generate_status_html(state.status_message), stats_html, queries, interactive, label
