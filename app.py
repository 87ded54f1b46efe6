"""
Smart FAQ Admin Workbench
Smart FAQ 管理后台

Main entry point for the Gradio application.
"""

import atexit
import logging
from typing import Optional

import gradio as gr

from services import FaqApiClient, Mode, set_client
from ui.layout import create_admin_layout
from ui.event_handlers import (
    create_app_state,
    handle_mode_select,
    update_draft_field,
    handle_session_start,
    lock_curation,
    handle_add_entry,
    handle_delete_entry,
    lock_probe,
    handle_probe,
    lock_analytics,
    handle_analytics_refresh
)
from utils.config import Settings, load_settings, configure_logging
from utils.performance import get_monitor

logger = logging.getLogger(__name__)


def _mode_button_classes(active: bool) -> list:
    return ["mode-btn", "mode-btn-active"] if active else ["mode-btn"]


def probe_control_updates(interactive: bool, search_label: str) -> tuple:
    """Updates for (search_btn, query_input); Enter in the query box submits too."""
    return gr.update(interactive=interactive, value=search_label), gr.update(interactive=interactive)


def main(settings: Optional[Settings] = None):
    """Main application entry point."""
    settings = settings or load_settings()
    configure_logging(settings.log_level)
    
    client = FaqApiClient(settings.api_url, timeout=settings.timeout)
    set_client(client)
    atexit.register(client.close)
    atexit.register(get_monitor().log_stats)
    
    with gr.Blocks(title="Smart FAQ 管理后台") as app:
        
        # Application State - 每个浏览器会话一份深拷贝
        app_state = gr.State(create_app_state())
        
        components = create_admin_layout()
        
        # ========== Session Start ==========
        
        def on_load(state):
            state, status_html, entry_html, choices, label, stats_html, queries = handle_session_start(state)
            return (
                state, status_html, entry_html,
                gr.update(choices=choices, value=None),
                gr.update(value=label),
                stats_html, queries
            )
        
        app.load(
            fn=on_load,
            inputs=[app_state],
            outputs=[
                app_state,
                components['status_display'],
                components['entry_list'],
                components['delete_selector'],
                components['mode_curation_btn'],
                components['feedback_stats'],
                components['popular_queries']
            ]
        )
        
        # ========== Mode Controller ==========
        
        def on_mode_select(mode, state):
            state, curation_vis, probe_vis, analytics_vis = handle_mode_select(mode, state)
            return (
                state,
                gr.update(visible=curation_vis),
                gr.update(visible=probe_vis),
                gr.update(visible=analytics_vis),
                gr.update(elem_classes=_mode_button_classes(curation_vis)),
                gr.update(elem_classes=_mode_button_classes(probe_vis)),
                gr.update(elem_classes=_mode_button_classes(analytics_vis))
            )
        
        mode_outputs = [
            app_state,
            components['curation_panel'],
            components['probe_panel'],
            components['analytics_panel'],
            components['mode_curation_btn'],
            components['mode_probe_btn'],
            components['mode_analytics_btn']
        ]
        
        for mode, button_key in (
            (Mode.CURATION, 'mode_curation_btn'),
            (Mode.PROBE, 'mode_probe_btn'),
            (Mode.ANALYTICS, 'mode_analytics_btn')
        ):
            components[button_key].click(
                fn=lambda state, mode=mode: on_mode_select(mode.value, state),
                inputs=[app_state],
                outputs=mode_outputs
            )
        
        # ========== Draft Entry ==========
        
        for field_name, input_key in (
            ("question", 'question_input'),
            ("answer", 'answer_input'),
            ("category", 'category_input')
        ):
            components[input_key].input(
                fn=lambda value, state, field_name=field_name: update_draft_field(field_name, value, state),
                inputs=[components[input_key], app_state],
                outputs=[app_state]
            )
        
        # ========== Curation ==========
        
        def on_lock_curation():
            interactive, add_label = lock_curation()
            return (
                gr.update(interactive=interactive, value=add_label),
                gr.update(interactive=interactive)
            )
        
        curation_controls = [components['add_btn'], components['delete_btn']]
        
        def on_add(state):
            (state, status_html, question, answer, category,
             entry_html, choices, label, interactive, add_label) = handle_add_entry(state)
            return (
                state, status_html, question, answer, category, entry_html,
                gr.update(choices=choices, value=None),
                gr.update(value=label),
                gr.update(interactive=interactive, value=add_label),
                gr.update(interactive=interactive)
            )
        
        components['add_btn'].click(
            fn=on_lock_curation,
            inputs=[],
            outputs=curation_controls
        ).then(
            fn=on_add,
            inputs=[app_state],
            outputs=[
                app_state,
                components['status_display'],
                components['question_input'],
                components['answer_input'],
                components['category_input'],
                components['entry_list'],
                components['delete_selector'],
                components['mode_curation_btn'],
                components['add_btn'],
                components['delete_btn']
            ]
        )
        
        def on_delete(entry_id, state):
            state, status_html, entry_html, choices, label, interactive, add_label = handle_delete_entry(entry_id, state)
            return (
                state, status_html, entry_html,
                gr.update(choices=choices, value=None),
                gr.update(value=label),
                gr.update(interactive=interactive, value=add_label),
                gr.update(interactive=interactive)
            )
        
        components['delete_btn'].click(
            fn=on_lock_curation,
            inputs=[],
            outputs=curation_controls
        ).then(
            fn=on_delete,
            inputs=[components['delete_selector'], app_state],
            outputs=[
                app_state,
                components['status_display'],
                components['entry_list'],
                components['delete_selector'],
                components['mode_curation_btn'],
                components['add_btn'],
                components['delete_btn']
            ]
        )
        
        # ========== Probe ==========
        
        def on_lock_probe():
            return probe_control_updates(*lock_probe())
        
        def on_probe(query, state):
            state, status_html, result_html, interactive, label = handle_probe(query, state)
            return (state, status_html, result_html) + probe_control_updates(interactive, label)
        
        probe_controls = [components['search_btn'], components['query_input']]
        probe_outputs = [
            app_state,
            components['status_display'],
            components['probe_result']
        ] + probe_controls
        
        # 按钮点击与回车均可提交，搜索期间两者都锁定
        for trigger in (components['search_btn'].click, components['query_input'].submit):
            trigger(
                fn=on_lock_probe,
                inputs=[],
                outputs=probe_controls
            ).then(
                fn=on_probe,
                inputs=[components['query_input'], app_state],
                outputs=probe_outputs
            )
        
        # ========== Analytics ==========
        
        def on_lock_analytics():
            interactive, label = lock_analytics()
            return gr.update(interactive=interactive, value=label)
        
        def on_analytics_refresh(state):
            state, status_html, stats_html, queries, interactive, label = handle_analytics_refresh(state)
            return state, status_html, stats_html, queries, gr.update(interactive=interactive, value=label)
        
        components['analytics_refresh_btn'].click(
            fn=on_lock_analytics,
            inputs=[],
            outputs=[components['analytics_refresh_btn']]
        ).then(
            fn=on_analytics_refresh,
            inputs=[app_state],
            outputs=[
                app_state,
                components['status_display'],
                components['feedback_stats'],
                components['popular_queries'],
                components['analytics_refresh_btn']
            ]
        )
        
        # Footer
        gr.HTML('<hr style="border: 1px solid #e0e0e0; margin: 20px 0;">')
        gr.Markdown(f"服务地址: `{settings.api_url}`")
    
    logger.info(f"Workbench ready, service at {settings.api_url}")
    return app


if __name__ == "__main__":
    settings = load_settings()
    app = main(settings)
    app.launch(
        server_name=settings.host,
        server_port=settings.port,
        theme=gr.themes.Soft(),
        show_error=True
    )
