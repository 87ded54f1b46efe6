"""
UI layout components for Smart FAQ Admin Workbench.

Defines the mode bar and the three mutually exclusive panels.
"""

import gradio as gr
from typing import Dict, Any

from ui.event_handlers import (
    ADD_LABEL,
    DELETE_LABEL,
    SEARCH_LABEL,
    REFRESH_LABEL,
    curation_tab_label,
    generate_status_html
)
from services import RenderEngine


# 全局样式 - 紧凑布局、蓝色分割线、卡片式统计
GLOBAL_CSS = """
<style>
.gradio-container {
    font-size: 16px !important;
}

/* 模式切换栏 */
.mode-btn {
    font-size: 15px !important;
    background: #ffffff !important;
    border: none !important;
    border-bottom: 2px solid transparent !important;
    color: #6b7280 !important;
}

.mode-btn-active {
    border-bottom: 2px solid #1976d2 !important;
    color: #1976d2 !important;
}

/* 状态栏 */
.load-status {
    padding: 8px 12px !important;
    border-radius: 6px !important;
    font-size: 15px !important;
    background: #fafafa !important;
    border: 1px solid #90caf9 !important;
}

/* 面板卡片 */
.panel-title {
    font-size: 18px !important;
    font-weight: bold;
    margin-bottom: 8px;
}

/* FAQ列表 */
.entry-list-container {
    max-height: 600px;
    overflow-y: auto;
    padding: 10px;
}

.entry-item {
    border-bottom: 1px solid #e5e7eb;
    padding: 10px 0;
}

.entry-question {
    font-weight: 600;
    color: #111827;
}

.entry-answer {
    font-size: 14px;
    color: #4b5563;
    margin-top: 4px;
}

.category-badge {
    display: inline-block;
    margin-top: 6px;
    padding: 2px 8px;
    font-size: 12px;
    background: #f3f4f6;
    color: #374151;
    border-radius: 4px;
}

.empty-state {
    color: #9e9e9e;
}

/* 测试搜索结果 */
.probe-answer {
    background: #eff6ff;
    padding: 14px;
    border-radius: 8px;
}

.probe-meta {
    margin-top: 8px;
    font-size: 14px;
    color: #4b5563;
}

.probe-source {
    border-left: 4px solid #1976d2;
    padding: 8px 14px;
    margin-bottom: 8px;
    background: #f9fafb;
}

.probe-similarity {
    font-size: 12px;
    color: #6b7280;
    margin-top: 4px;
}

/* 数据分析卡片 */
.metric-grid {
    display: grid;
    grid-template-columns: repeat(3, 1fr);
    gap: 16px;
}

.metric-card {
    text-align: center;
    padding: 16px;
    background: #f9fafb;
    border-radius: 6px;
}

.metric-value {
    font-size: 30px;
    font-weight: bold;
    color: #111827;
}

.metric-label {
    font-size: 14px;
    color: #4b5563;
}

.primary-btn {
    background: #1976d2 !important;
    color: white !important;
}

.danger-btn {
    background: #f44336 !important;
    color: white !important;
}
</style>
"""


def get_global_css() -> str:
    """Return the global stylesheet injected at the top of the page."""
    return GLOBAL_CSS


def create_header(components: Dict[str, Any]) -> None:
    """创建标题与状态栏（第一行）"""
    with gr.Row():
        with gr.Column(scale=4):
            gr.Markdown("# 🤖 Smart FAQ 管理后台")
        with gr.Column(scale=3):
            components['status_display'] = gr.HTML(generate_status_html("⏳ 正在加载..."))


def create_mode_bar(components: Dict[str, Any]) -> None:
    """创建模式切换栏（第二行）"""
    with gr.Row():
        components['mode_curation_btn'] = gr.Button(
            curation_tab_label(0),
            size="sm",
            elem_classes=["mode-btn", "mode-btn-active"]
        )
        components['mode_probe_btn'] = gr.Button(
            "🔍 测试搜索",
            size="sm",
            elem_classes=["mode-btn"]
        )
        components['mode_analytics_btn'] = gr.Button(
            "📊 数据分析",
            size="sm",
            elem_classes=["mode-btn"]
        )
    
    gr.HTML('<hr style="border: 1px solid #1976d2; margin: 3px 0;">')


def create_curation_panel(components: Dict[str, Any]) -> None:
    """创建FAQ管理面板"""
    with gr.Column(visible=True) as curation_panel:
        components['curation_panel'] = curation_panel
        
        with gr.Group():
            gr.HTML('<div class="panel-title">➕ 添加新FAQ</div>')
            components['question_input'] = gr.Textbox(
                label="问题",
                placeholder="问题",
                lines=1
            )
            components['answer_input'] = gr.Textbox(
                label="回答",
                placeholder="回答",
                lines=3
            )
            components['category_input'] = gr.Textbox(
                label="分类（可选）",
                placeholder="分类（可选）",
                lines=1
            )
            components['add_btn'] = gr.Button(
                ADD_LABEL,
                size="lg",
                elem_classes=["primary-btn"]
            )
        
        with gr.Group():
            gr.HTML('<div class="panel-title">📋 现有FAQ</div>')
            with gr.Row():
                with gr.Column(scale=4):
                    components['delete_selector'] = gr.Dropdown(
                        choices=[],
                        label="选择要删除的FAQ",
                        interactive=True
                    )
                with gr.Column(scale=1):
                    components['delete_btn'] = gr.Button(
                        DELETE_LABEL,
                        elem_classes=["danger-btn"]
                    )
            components['entry_list'] = gr.HTML(
                RenderEngine().render_entry_list([])
            )


def create_probe_panel(components: Dict[str, Any]) -> None:
    """创建测试搜索面板"""
    with gr.Column(visible=False) as probe_panel:
        components['probe_panel'] = probe_panel
        
        gr.HTML('<div class="panel-title">🔍 测试搜索与AI回答</div>')
        with gr.Row():
            with gr.Column(scale=5):
                components['query_input'] = gr.Textbox(
                    label="",
                    show_label=False,
                    placeholder="输入一个问题...",
                    lines=1
                )
            with gr.Column(scale=1):
                components['search_btn'] = gr.Button(
                    SEARCH_LABEL,
                    elem_classes=["primary-btn"]
                )
        components['probe_result'] = gr.HTML("")


def create_analytics_panel(components: Dict[str, Any]) -> None:
    """创建数据分析面板"""
    render_engine = RenderEngine()
    
    with gr.Column(visible=False) as analytics_panel:
        components['analytics_panel'] = analytics_panel
        
        with gr.Row():
            with gr.Column(scale=5):
                gr.HTML('<div class="panel-title">⭐ 反馈统计</div>')
            with gr.Column(scale=1):
                components['analytics_refresh_btn'] = gr.Button(REFRESH_LABEL, size="sm")
        components['feedback_stats'] = gr.HTML(render_engine.render_feedback_stats(None))
        
        gr.HTML('<div class="panel-title">🔥 热门查询（最近7天）</div>')
        components['popular_queries'] = gr.Dataframe(
            value=render_engine.popular_queries_frame(None),
            interactive=False,
            wrap=True
        )


def create_admin_layout() -> Dict[str, Any]:
    """
    创建完整的管理后台布局
    
    Returns:
        包含所有UI组件的字典
    """
    components = {}
    
    # 注入全局CSS
    gr.HTML(get_global_css())
    
    create_header(components)
    create_mode_bar(components)
    
    # 三个面板互斥显示，初始为FAQ管理
    create_curation_panel(components)
    create_probe_panel(components)
    create_analytics_panel(components)
    
    return components
