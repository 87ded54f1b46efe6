"""
RenderEngine for workbench display content.

Turns entries, probe results and analytics snapshots into the HTML
fragments and tables shown by the Gradio panels. All operator and service
text is HTML-escaped before it is interpolated.
"""

import html
import math
from typing import List, Optional

import markdown
import pandas as pd

from models import Entry, ProbeResult, AnalyticsSnapshot


NOT_AVAILABLE = "N/A"

POPULAR_QUERY_COLUMNS = ["查询", "次数", "平均耗时 (ms)"]


def format_percent(value: float) -> str:
    """0.87 -> '87.0%'"""
    return f"{value * 100:.1f}%"


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_rating(value: Optional[float]) -> str:
    """Average rating to one decimal, or N/A when absent."""
    if value is None:
        return NOT_AVAILABLE
    return f"{value:.1f}"


def format_count(value: Optional[int]) -> str:
    return str(value or 0)


class RenderEngine:
    """
    Rendering engine for panel content.
    
    Provides methods to:
    - Render answer text (Markdown) to HTML
    - Render the entry list
    - Render probe results with confidence and similarity
    - Render feedback metric cards and the popular-queries table
    """
    
    def __init__(self):
        """Initialize RenderEngine with Markdown processor."""
        self.md = markdown.Markdown(extensions=['extra', 'nl2br', 'sane_lists'])
    
    def render_markdown(self, text: str) -> str:
        """
        Render answer text as Markdown.
        
        Raw HTML in text is escaped first, so only Markdown formatting
        takes effect.
        """
        if not text:
            return ""
        
        try:
            return self.md.convert(html.escape(text))
        finally:
            self.md.reset()
    
    def render_entry_list(self, entries: List[Entry]) -> str:
        """
        Render entries in store order.
        
        Args:
            entries: Entries as held by the EntryStore
        
        Returns:
            HTML string for the entry list
        """
        if not entries:
            return '<div class="entry-list-container empty-state">暂无FAQ</div>'
        
        html_parts = ['<div class="entry-list-container">']
        for entry in entries:
            category_html = ""
            if entry.category:
                category_html = f'<span class="category-badge">{html.escape(entry.category)}</span>'
            
            html_parts.append(f'''
            <div class="entry-item" data-entry-id="{html.escape(entry.id, quote=True)}">
                <div class="entry-question">{html.escape(entry.question)}</div>
                <div class="entry-answer">{html.escape(entry.answer)}</div>
                {category_html}
            </div>
            ''')
        
        html_parts.append("</div>")
        return "".join(html_parts)
    
    def render_probe_result(self, result: Optional[ProbeResult]) -> str:
        """
        Render an answer, its confidence/latency line and matched entries.
        
        Args:
            result: Last probe result, or None before any probe
        
        Returns:
            HTML string (empty when there is no result)
        """
        if result is None:
            return ""
        
        html_parts = [f'''
        <div class="probe-answer">
            <h3>🤖 AI回答：</h3>
            <div class="probe-answer-text">{self.render_markdown(result.answer)}</div>
            <div class="probe-meta">置信度: {format_percent(result.confidence)} | 响应时间: {result.response_time}ms</div>
        </div>
        ''']
        
        if result.sources:
            html_parts.append('<div class="probe-sources"><h3>📎 匹配的FAQ：</h3>')
            for source in result.sources:
                html_parts.append(f'''
                <div class="probe-source">
                    <div class="entry-question">{html.escape(source.question)}</div>
                    <div class="entry-answer">{html.escape(source.answer)}</div>
                    <div class="probe-similarity">相似度: {format_percent(source.similarity)}</div>
                </div>
                ''')
            html_parts.append('</div>')
        
        return "".join(html_parts)
    
    def render_feedback_stats(self, snapshot: Optional[AnalyticsSnapshot]) -> str:
        """
        Render the three feedback metric cards.
        
        Without a snapshot every metric shows N/A.
        
        Args:
            snapshot: Last analytics snapshot, or None
        
        Returns:
            HTML string with three metric cards
        """
        if snapshot is None:
            values = [NOT_AVAILABLE, NOT_AVAILABLE, NOT_AVAILABLE]
        else:
            stats = snapshot.feedback_stats
            values = [
                format_rating(stats.avg_rating),
                format_count(stats.helpful_count),
                format_count(stats.total_feedback)
            ]
        
        labels = ["平均评分", "有帮助", "反馈总数"]
        cards = "".join(
            f'<div class="metric-card"><div class="metric-value">{value}</div>'
            f'<div class="metric-label">{label}</div></div>'
            for value, label in zip(values, labels)
        )
        return f'<div class="metric-grid">{cards}</div>'
    
    def popular_queries_frame(self, snapshot: Optional[AnalyticsSnapshot]) -> pd.DataFrame:
        """
        Build the popular-queries table in service order.
        
        Average time is rounded to whole milliseconds; a missing average
        shows N/A.
        
        Args:
            snapshot: Last analytics snapshot, or None
        
        Returns:
            DataFrame with POPULAR_QUERY_COLUMNS (empty without a snapshot)
        """
        if snapshot is None or not snapshot.popular_queries:
            return pd.DataFrame(columns=POPULAR_QUERY_COLUMNS)
        
        rows = [
            [
                item.query,
                item.count,
                NOT_AVAILABLE if item.avg_time is None else round_half_up(item.avg_time)
            ]
            for item in snapshot.popular_queries
        ]
        return pd.DataFrame(rows, columns=POPULAR_QUERY_COLUMNS)
