"""UI components for Smart FAQ Admin Workbench."""

from .layout import create_admin_layout
from .event_handlers import (
    create_app_state,
    generate_status_html,
    curation_tab_label,
    entry_choices,
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

__all__ = [
    "create_admin_layout",
    "create_app_state",
    "generate_status_html",
    "curation_tab_label",
    "entry_choices",
    "handle_mode_select",
    "update_draft_field",
    "handle_session_start",
    "lock_curation",
    "handle_add_entry",
    "handle_delete_entry",
    "lock_probe",
    "handle_probe",
    "lock_analytics",
    "handle_analytics_refresh"
]
