"""UI components for Vocabulary Import Workbench."""

from .layout import (
    create_import_layout,
    get_global_css
)
from .event_handlers import (
    empty_state,
    generate_status_html,
    session_dataframe,
    handle_paste,
    handle_mode_change,
    handle_reparse,
    load_row_to_editor,
    handle_update_row,
    handle_set_status,
    handle_accept,
    handle_discard
)

__all__ = [
    "create_import_layout",
    "get_global_css",
    "empty_state",
    "generate_status_html",
    "session_dataframe",
    "handle_paste",
    "handle_mode_change",
    "handle_reparse",
    "load_row_to_editor",
    "handle_update_row",
    "handle_set_status",
    "handle_accept",
    "handle_discard"
]
